"""Scene catalog reader."""
import csv
import gzip
import logging
from pathlib import Path

from nightscan.models.record import MIN_FIELDS, SceneRecord

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """The catalog cannot be opened or has no header."""


class CatalogReader:
    """
    Lazy, single-pass reader over a scene list CSV.

    The header row is consumed on construction. Iterating yields one
    SceneRecord per well-formed row; malformed rows are logged and skipped.
    Gzip-compressed catalogs (``*.gz``) are read transparently.
    """

    def __init__(self, path):
        self.path = Path(path)
        try:
            self._file = self._open(self.path)
        except OSError as e:
            raise CatalogError(f"Cannot open scene list {self.path}: {e}") from e

        self._reader = csv.reader(self._file)
        try:
            self.header = next(self._reader)
        except (StopIteration, csv.Error, OSError, EOFError) as e:
            self.close()
            raise CatalogError(f"Cannot read header of scene list {self.path}") from e
        logger.debug("Catalog columns: %s", ", ".join(self.header))

    @staticmethod
    def _open(path):
        # undecodable bytes become U+FFFD so a bad row is skipped, not fatal
        if path.suffix == ".gz":
            return gzip.open(path, "rt", encoding="utf-8", errors="replace", newline="")
        return open(path, encoding="utf-8", errors="replace", newline="")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __iter__(self):
        return self.records()

    def records(self):
        """Yield SceneRecords until the catalog is exhausted, then release the file."""
        try:
            while True:
                try:
                    row = next(self._reader)
                except StopIteration:
                    return
                except csv.Error as e:
                    logger.warning("Error reading csv line %d: %s", self._reader.line_num, e)
                    continue

                if not row:
                    continue

                record = SceneRecord.from_row(row, line=self._reader.line_num)
                if not record.is_complete:
                    logger.warning(
                        "Skipping csv line %d: expected at least %d fields, got %d",
                        record.line,
                        MIN_FIELDS,
                        len(row),
                    )
                    continue
                yield record
        finally:
            self.close()

    def close(self):
        if not self._file.closed:
            self._file.close()
