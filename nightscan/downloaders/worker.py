"""Per-record processing: resolve, filter, classify, download."""
import logging
import shutil
from pathlib import Path

import requests
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from urllib3.exceptions import HTTPError as StreamError

from nightscan.config import config
from nightscan.models.artifact import Artifact
from nightscan.models.scene import Outcome, SceneRecordError
from nightscan.utils.dates import in_window

logger = logging.getLogger(__name__)

# StreamError covers failures while reading an uncached response body
TRANSIENT_ERRORS = (requests.RequestException, OSError, StreamError)


class SceneWorker:
    """
    Processes catalog records one at a time.

    A worker keeps no state between records, so one instance can be shared
    by every pool thread.
    """

    def __init__(
        self,
        source,
        download_root=None,
        date_from=None,
        date_to=None,
        bands=(),
        bqa=False,
        retries=None,
        retry_wait=None,
        retry_wait_max=None,
        chunk_size=None,
    ):
        self.source = source
        self.download_root = Path(download_root or config.download_root)
        self.date_from = date_from
        self.date_to = date_to
        self.bands = [int(b) for b in bands]
        self.bqa = bqa
        self.retries = max(1, retries if retries is not None else config.retries)
        self.retry_wait = config.retry_wait if retry_wait is None else retry_wait
        self.retry_wait_max = config.retry_wait_max if retry_wait_max is None else retry_wait_max
        self.chunk_size = chunk_size or config.download_chunk_size

    def _retrying(self):
        """Retry policy applied to each fallible network or file operation."""
        return Retrying(
            stop=stop_after_attempt(self.retries),
            wait=wait_exponential(multiplier=self.retry_wait, max=self.retry_wait_max),
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )

    def artifacts(self, scene):
        """Artifacts to save for a nighttime scene, metadata first."""
        artifacts = [Artifact.metadata(scene.id)]
        if self.bqa:
            artifacts.append(Artifact.qa(scene.id))
        artifacts.extend(Artifact.for_band(scene.id, band) for band in self.bands)
        return artifacts

    def process(self, record):
        """
        Run one catalog record through the pipeline.

        Returns:
            Outcome; only Outcome.DONE means every artifact was saved
        """
        try:
            scene = self.source.resolve(record)
        except SceneRecordError as e:
            logger.error("Failed to parse scene record on line %d: %s", record.line, e)
            return Outcome.INVALID

        if not in_window(scene.acquired, self.date_from, self.date_to):
            return Outcome.FILTERED

        try:
            day = self._retrying()(scene.is_day)
        except TRANSIENT_ERRORS as e:
            logger.error("Failed to determine if %s is nighttime: %s", scene.id, e)
            return Outcome.FAILED

        if day:
            logger.debug("Skipping daytime scene %s", scene.id)
            return Outcome.DAYTIME

        directory = self.download_root / scene.id
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Failed to create storage directory %s: %s", directory, e)
            return Outcome.FAILED

        for artifact in self.artifacts(scene):
            try:
                self._retrying()(self._save, scene, artifact, directory / artifact.filename)
            except TRANSIENT_ERRORS as e:
                logger.error("Failed to download %s: %s", artifact.filename, e)
                return Outcome.FAILED

        logger.info("Done with %s", scene.id)
        return Outcome.DONE

    def _save(self, scene, artifact, destination):
        """Copy one artifact into destination (single attempt)."""
        with open(destination, "wb") as out:
            with scene.open_artifact(artifact) as stream:
                shutil.copyfileobj(stream, out, self.chunk_size)
