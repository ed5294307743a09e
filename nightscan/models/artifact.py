"""Artifact references and their remote/cache locations."""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

METADATA_DIR = "metadata"
BANDS_DIR = "bands"


class ArtifactKind(str, Enum):
    METADATA = "metadata"
    QA = "qa"
    BAND = "band"


@dataclass(frozen=True)
class Artifact:
    """A single downloadable file belonging to a scene."""

    scene_id: str
    kind: ArtifactKind
    band: Optional[int] = None

    @classmethod
    def metadata(cls, scene_id):
        return cls(scene_id, ArtifactKind.METADATA)

    @classmethod
    def qa(cls, scene_id):
        return cls(scene_id, ArtifactKind.QA)

    @classmethod
    def for_band(cls, scene_id, band):
        return cls(scene_id, ArtifactKind.BAND, int(band))

    @property
    def filename(self):
        """Remote and local file name of the artifact."""
        if self.kind is ArtifactKind.METADATA:
            return f"{self.scene_id}_MTL.txt"
        if self.kind is ArtifactKind.QA:
            return f"{self.scene_id}_BQA.TIF"
        return f"{self.scene_id}_B{self.band}.TIF"

    @property
    def is_raster(self):
        return self.kind is not ArtifactKind.METADATA

    def url(self, base_url):
        return base_url + self.filename

    def cache_path(self, cache_root):
        """
        Location of the artifact inside the cache tree.

        Metadata files are cached as {root}/metadata/{id}{id}_MTL.txt; existing
        caches are laid out this way, so the doubled identifier is kept.
        """
        root = Path(cache_root)
        if self.kind is ArtifactKind.METADATA:
            return root / METADATA_DIR / (self.scene_id + self.filename)
        return root / BANDS_DIR / self.filename
