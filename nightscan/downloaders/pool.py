"""Fixed-size pool of scene workers fed through a bounded queue."""
import logging
import queue
from collections import Counter
from concurrent.futures import ThreadPoolExecutor, wait

from nightscan.models.scene import Outcome

logger = logging.getLogger(__name__)

_STOP = object()


class WorkerPool:
    """Run SceneWorker.process on queued records using threading."""

    def __init__(self, worker, num_workers, results):
        """
        Initialize worker pool.

        Args:
            worker: SceneWorker shared by all threads
            num_workers: Number of threads (values below 1 become 1)
            results: Object with a put(scene_id) method, normally a ResultSink
        """
        self.worker = worker
        self.num_workers = max(1, int(num_workers))
        self.results = results
        self.records = queue.Queue(maxsize=self.num_workers)
        self._executor = None
        self._futures = []

    def start(self):
        self._executor = ThreadPoolExecutor(
            max_workers=self.num_workers, thread_name_prefix="scene-worker"
        )
        self._futures = [self._executor.submit(self._run) for _ in range(self.num_workers)]

    def submit(self, record):
        """Queue a record, blocking while every worker is busy and the queue is full."""
        self.records.put(record)

    def close(self):
        """Signal that no more records will be submitted."""
        for _ in range(self.num_workers):
            self.records.put(_STOP)

    def join(self):
        """
        Wait for every worker to drain the queue.

        Returns:
            Counter of Outcome values over all processed records
        """
        totals = Counter()
        if self._executor is None:
            return totals
        wait(self._futures)
        for future in self._futures:
            totals.update(future.result())
        self._executor.shutdown()
        return totals

    def _run(self):
        """Worker loop; each thread counts its own outcomes."""
        counts = Counter()
        while True:
            record = self.records.get()
            if record is _STOP:
                return counts
            try:
                outcome = self.worker.process(record)
            except Exception:
                logger.exception("Unexpected error processing line %d", record.line)
                outcome = Outcome.FAILED
            if outcome is Outcome.DONE:
                self.results.put(record.identifier)
            counts[outcome] += 1
