"""Catalog row model."""
from dataclasses import dataclass
from typing import Tuple

# Positional layout of a scene list row
ID_FIELD = 0
ACQUIRED_FIELD = 1
CLOUD_COVER_FIELD = 2
LEVEL_FIELD = 3
URL_FIELD = 10

MIN_FIELDS = URL_FIELD + 1


@dataclass(frozen=True)
class SceneRecord:
    """One row of the scene catalog."""

    fields: Tuple[str, ...]
    line: int = 0

    @classmethod
    def from_row(cls, row, line=0):
        """Create a record from a parsed CSV row."""
        return cls(fields=tuple(row), line=line)

    @property
    def is_complete(self):
        return len(self.fields) >= MIN_FIELDS

    @property
    def identifier(self):
        return self.fields[ID_FIELD]

    @property
    def acquired(self):
        return self.fields[ACQUIRED_FIELD]

    @property
    def cloud_cover(self):
        return self.fields[CLOUD_COVER_FIELD]

    @property
    def processing_level(self):
        return self.fields[LEVEL_FIELD]

    @property
    def download_url(self):
        return self.fields[URL_FIELD]
