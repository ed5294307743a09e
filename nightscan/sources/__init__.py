"""Scene sources."""

from nightscan.sources.base import Scene, SceneSource
from nightscan.sources.http import HttpScene, HttpSceneSource

__all__ = ["Scene", "SceneSource", "HttpScene", "HttpSceneSource"]
