"""Scene and scene source interfaces."""
import logging
from abc import ABC, abstractmethod

from nightscan.models.artifact import Artifact
from nightscan.utils.mtl import is_daytime, read_sun_elevation

logger = logging.getLogger(__name__)


class Scene(ABC):
    """
    One acquisition, as seen by a worker.

    A scene is owned by the worker that resolved it, so the memoized
    day/night flag needs no locking.
    """

    def __init__(self, scene_id, acquired, cloud_cover, processing_level):
        self._id = scene_id
        self.acquired = acquired
        self.cloud_cover = cloud_cover
        self.processing_level = processing_level
        self._day = None

    @property
    def id(self):
        return self._id

    def __repr__(self):
        return f"{type(self).__name__}({self._id!r}, acquired={self.acquired.isoformat()})"

    @abstractmethod
    def open_artifact(self, artifact):
        """
        Open a readable binary stream over one of this scene's artifacts.

        Args:
            artifact: Artifact belonging to this scene

        Returns:
            File-like object; the caller closes it
        """
        pass

    def get_metadata(self):
        return self.open_artifact(Artifact.metadata(self.id))

    def get_qa(self):
        return self.open_artifact(Artifact.qa(self.id))

    def get_band(self, band):
        return self.open_artifact(Artifact.for_band(self.id, band))

    def is_day(self):
        """
        Classify the scene from the sun elevation in its metadata.

        The first call fetches the metadata; the answer is remembered once a
        read succeeds. A metadata file without SUN_ELEVATION counts as night.
        """
        if self._day is None:
            with self.get_metadata() as stream:
                elevation = read_sun_elevation(stream)
            if elevation is None:
                logger.debug("No SUN_ELEVATION in metadata of %s", self.id)
            self._day = is_daytime(elevation)
        return self._day


class SceneSource(ABC):
    """Turns catalog records into scenes backed by some artifact store."""

    @abstractmethod
    def resolve(self, record):
        """
        Build a Scene from a catalog record.

        Raises:
            UnexpectedLevel: unknown processing level
            SceneRecordError: any other malformed field
        """
        pass
