"""Single-writer sink for processed scene identifiers."""
import logging
import queue
import threading
from pathlib import Path

logger = logging.getLogger(__name__)

_STOP = object()


class ResultSink:
    """
    Append scene ids to the result file from one dedicated thread.

    Only the sink thread ever writes to the file handle, so producers just
    put ids on the queue.
    """

    def __init__(self, path, capacity=1):
        self.path = Path(path)
        self.queue = queue.Queue(maxsize=max(1, capacity))
        self.written = 0
        self._handle = open(self.path, "w")
        self._thread = threading.Thread(target=self._drain, name="result-sink", daemon=True)

    def start(self):
        self._thread.start()

    def put(self, scene_id):
        """Queue a scene id for writing, blocking while the queue is full."""
        self.queue.put(scene_id)

    def close(self):
        """Signal that no more ids will be queued."""
        self.queue.put(_STOP)

    def join(self):
        """Wait for every queued id to be written, then close the file."""
        if self._thread.is_alive():
            self._thread.join()
        self._handle.close()

    def _drain(self):
        while True:
            scene_id = self.queue.get()
            if scene_id is _STOP:
                return
            try:
                self._handle.write(scene_id + "\n")
                self._handle.flush()
                self.written += 1
            except OSError as e:
                logger.error('Failed to write id "%s": %s', scene_id, e)
