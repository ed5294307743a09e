"""Pipeline driver: catalog -> worker pool -> result sink."""
import logging
from dataclasses import dataclass, field
from collections import Counter

from nightscan.downloaders.pool import WorkerPool
from nightscan.models.scene import Outcome
from nightscan.storage.catalog import CatalogReader
from nightscan.storage.results import ResultSink

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Outcome counts of one pipeline run."""

    outcomes: Counter = field(default_factory=Counter)
    written: int = 0

    @property
    def total(self):
        return sum(self.outcomes.values())

    def count(self, outcome):
        return self.outcomes.get(Outcome(outcome), 0)


def run_pipeline(catalog_path, result_path, worker, num_workers):
    """
    Process every record of a catalog and record the ids of finished scenes.

    Shutdown order matters: the input queue is closed and the workers joined
    before the result queue is closed, so no finished id is dropped.

    Args:
        catalog_path: Scene list CSV (optionally gzip-compressed)
        result_path: File receiving one scene id per line; truncated first
        worker: SceneWorker applied to each record
        num_workers: Number of worker threads

    Returns:
        RunSummary

    Raises:
        CatalogError: the catalog cannot be opened or has no header
        OSError: the result file cannot be created
    """
    with CatalogReader(catalog_path) as catalog:
        sink = ResultSink(result_path, capacity=num_workers)
        pool = WorkerPool(worker, num_workers, sink)
        logger.info("Processing %s with %d workers", catalog_path, pool.num_workers)

        sink.start()
        pool.start()
        try:
            for record in catalog:
                pool.submit(record)
        finally:
            pool.close()
            outcomes = pool.join()
            sink.close()
            sink.join()

    return RunSummary(outcomes=outcomes, written=sink.written)
