"""Data models."""

from nightscan.models.record import SceneRecord
from nightscan.models.scene import ProcessingLevel, SceneRecordError, UnexpectedLevel, Outcome
from nightscan.models.artifact import Artifact, ArtifactKind

__all__ = [
    "SceneRecord",
    "ProcessingLevel",
    "SceneRecordError",
    "UnexpectedLevel",
    "Outcome",
    "Artifact",
    "ArtifactKind",
]
