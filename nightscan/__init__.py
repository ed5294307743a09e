"""nightscan - nighttime Landsat scene retrieval tool."""

__version__ = "1.0.0"

from nightscan.config import config

__all__ = ["config", "__version__"]
