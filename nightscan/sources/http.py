"""Scenes served over plain HTTP, with an optional local file cache."""
import math

from nightscan.config import config
from nightscan.models.scene import ProcessingLevel, SceneRecordError
from nightscan.sources.base import Scene, SceneSource
from nightscan.utils.dates import parse_acquisition_time

INDEX_PAGE = "index.html"


class HttpScene(Scene):
    """Scene whose artifacts live under base_url."""

    def __init__(self, source, scene_id, acquired, cloud_cover, processing_level, base_url):
        super().__init__(scene_id, acquired, cloud_cover, processing_level)
        self.source = source
        self.base_url = base_url

    def open_artifact(self, artifact):
        return self.source.open_artifact(artifact, self.base_url)


class HttpSceneSource(SceneSource):
    """
    Resolve catalog records into HttpScenes.

    Args:
        cache: FileCache used for every artifact read
        cache_root: Root of the cache tree (default from config)
        cache_metadata: Cache MTL files (default from config)
        cache_bands: Cache BQA and band rasters (default from config)
    """

    def __init__(self, cache, cache_root=None, cache_metadata=None, cache_bands=None):
        self.cache = cache
        self.cache_root = cache_root if cache_root is not None else config.cache_root
        self.cache_metadata = config.cache_metadata if cache_metadata is None else cache_metadata
        self.cache_bands = config.cache_bands if cache_bands is None else cache_bands

    def resolve(self, record):
        if not record.is_complete:
            raise SceneRecordError(f"Record on line {record.line} has only {len(record.fields)} fields")

        try:
            acquired = parse_acquisition_time(record.acquired)
        except ValueError as e:
            raise SceneRecordError(f"Bad acquisition time {record.acquired!r}: {e}") from e

        try:
            cloud_cover = float(record.cloud_cover)
        except ValueError as e:
            raise SceneRecordError(f"Bad cloud cover {record.cloud_cover!r}") from e
        if math.isnan(cloud_cover) or not 0 <= cloud_cover <= 100:
            raise SceneRecordError(f"Cloud cover out of range: {cloud_cover}")

        level = ProcessingLevel.parse(record.processing_level)

        return HttpScene(
            self,
            record.identifier,
            acquired,
            cloud_cover,
            level,
            base_url_of(record.download_url),
        )

    def open_artifact(self, artifact, base_url):
        cache_enabled = self.cache_bands if artifact.is_raster else self.cache_metadata
        return self.cache.fetch(
            artifact.url(base_url),
            artifact.cache_path(self.cache_root),
            cache_enabled,
        )


def base_url_of(download_url):
    """Strip the trailing index page from a catalog download URL."""
    download_url = download_url.strip()
    if download_url.endswith(INDEX_PAGE):
        return download_url[: -len(INDEX_PAGE)]
    return download_url
