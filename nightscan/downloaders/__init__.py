"""Scene processing workers and the thread pool that runs them."""

from nightscan.downloaders.worker import SceneWorker
from nightscan.downloaders.pool import WorkerPool

__all__ = ["SceneWorker", "WorkerPool"]
