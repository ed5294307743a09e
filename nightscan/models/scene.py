"""Scene level types and errors."""
from enum import Enum


class SceneRecordError(ValueError):
    """A catalog record could not be turned into a scene."""


class UnexpectedLevel(SceneRecordError):
    """The record carries a processing level outside the known vocabulary."""

    def __init__(self, code):
        super().__init__(f"Unexpected processing level: {code!r}")
        self.code = code


class ProcessingLevel(Enum):
    """Landsat correction level of a scene."""

    L1T = "L1T"
    L1GT = "L1GT"

    @classmethod
    def parse(cls, code):
        """Map a catalog level code to a ProcessingLevel, raising UnexpectedLevel otherwise."""
        try:
            return cls(code)
        except ValueError:
            raise UnexpectedLevel(code) from None


class Outcome(str, Enum):
    """What happened to one catalog record."""

    DONE = "done"
    FILTERED = "filtered"
    DAYTIME = "daytime"
    INVALID = "invalid"
    FAILED = "failed"
