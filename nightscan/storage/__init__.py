"""Local storage: catalog input, artifact cache and result output."""

from nightscan.storage.cache import FileCache
from nightscan.storage.catalog import CatalogError, CatalogReader
from nightscan.storage.results import ResultSink

__all__ = ["FileCache", "CatalogError", "CatalogReader", "ResultSink"]
