"""Check-then-fetch file cache in front of the HTTP client."""
import logging
import os
import tempfile
from pathlib import Path

from nightscan.config import config

logger = logging.getLogger(__name__)


class FileCache:
    """
    File cache keyed by local artifact path.

    Artifacts are immutable, so two threads fetching the same missing file
    both download it and the last write wins.
    """

    def __init__(self, client, chunk_size=None):
        self.client = client
        self.chunk_size = chunk_size or config.download_chunk_size

    def fetch(self, url, local_path, cache_enabled):
        """
        Return a readable binary stream for url.

        Args:
            url: Remote location of the artifact
            local_path: Cache file for the artifact
            cache_enabled: When False the network stream is returned and disk is not touched

        Returns:
            File-like object; the caller closes it
        """
        if not cache_enabled:
            return self.client.open(url)

        local_path = Path(local_path)
        if local_path.exists():
            logger.debug("Cached copy found: %s", local_path)
            return open(local_path, "rb")

        self._download(url, local_path)
        return open(local_path, "rb")

    def _download(self, url, local_path):
        """
        Copy the body of url into local_path.

        The body goes to a temporary file next to local_path that is renamed
        into place once complete, so readers never see a partial cache file.
        """
        response = self.client.get(url)
        tmp_path = None
        try:
            local_path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="wb", dir=local_path.parent, prefix=local_path.name + ".", suffix=".part", delete=False
            ) as f:
                tmp_path = Path(f.name)
                for chunk in response.iter_content(chunk_size=self.chunk_size):
                    if chunk:
                        f.write(chunk)
            os.replace(tmp_path, local_path)
        except Exception:
            logger.warning("Failed to save remote data to %s", local_path)
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise
        finally:
            response.close()
