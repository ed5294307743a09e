"""Reading values out of Landsat MTL metadata files."""
import io
import logging

logger = logging.getLogger(__name__)

SUN_ELEVATION_PREFIX = "SUN_ELEVATION = "


def read_sun_elevation(stream):
    """
    Scan an MTL stream for the sun elevation.

    Args:
        stream: Binary or text file-like object

    Returns:
        Sun elevation in degrees, or None if the key is not present
    """
    if isinstance(stream, io.TextIOBase):
        lines = stream
    else:
        lines = io.TextIOWrapper(stream, encoding="utf-8", errors="replace")

    for raw in lines:
        line = raw.strip()
        if not line.startswith(SUN_ELEVATION_PREFIX):
            continue
        value = line[len(SUN_ELEVATION_PREFIX):]
        try:
            return float(value)
        except ValueError:
            logger.warning("Unparsable SUN_ELEVATION value %r, reading it as 0", value)
            return 0.0
    return None


def is_daytime(sun_elevation):
    """A scene is daytime when the sun is at or above the horizon; a missing value means night."""
    if sun_elevation is None:
        return False
    return sun_elevation >= 0
