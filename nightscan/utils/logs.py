"""Logging setup."""
import logging

from rich.console import Console
from rich.logging import RichHandler

from nightscan.config import config


def configure_logging(level=None, fmt=None):
    """Route all log records through a rich handler on stderr."""
    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
    logging.basicConfig(
        level=(level or config.log_level).upper(),
        format=fmt or config.log_format,
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    # urllib3 connection chatter drowns out the per-scene lines
    logging.getLogger("urllib3").setLevel(logging.WARNING)
