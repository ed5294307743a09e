"""Utility functions."""

from nightscan.utils.dates import parse_acquisition_time, parse_day, in_window
from nightscan.utils.mtl import read_sun_elevation, is_daytime

__all__ = [
    "parse_acquisition_time",
    "parse_day",
    "in_window",
    "read_sun_elevation",
    "is_daytime",
]
