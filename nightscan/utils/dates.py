"""Date utilities for catalog timestamps and the acquisition window."""
from datetime import datetime, timezone

from dateutil import parser as date_parser

CATALOG_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def parse_acquisition_time(value):
    """
    Parse a scene list acquisition timestamp.

    Args:
        value: Timestamp in YYYY-MM-DD HH:MM:SS.ffffff format

    Returns:
        Naive datetime
    """
    return datetime.strptime(value.strip(), CATALOG_TIMESTAMP_FORMAT)


def parse_day(value):
    """
    Parse a command line day.

    Day-first strings (DD-MM-YYYY) are what the tool has always accepted;
    ISO dates (YYYY-MM-DD) work too.
    """
    value = value.strip()
    if len(value) >= 4 and value[:4].isdigit():
        parsed = date_parser.isoparse(value)
    else:
        parsed = date_parser.parse(value, dayfirst=True)
    # catalog timestamps are naive UTC
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def in_window(moment, date_from=None, date_to=None):
    """True when moment lies in the inclusive window; a None bound is open."""
    if date_from is not None and moment < date_from:
        return False
    if date_to is not None and moment > date_to:
        return False
    return True
