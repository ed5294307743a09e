"""Shared utilities for CLI commands."""
import click
from rich.console import Console

from nightscan.api.http import HttpClient
from nightscan.models.scene import Outcome
from nightscan.sources.http import HttpSceneSource
from nightscan.storage.cache import FileCache
from nightscan.utils.dates import parse_day

# Global console for consistent output
console = Console()


class DayParamType(click.ParamType):
    """Click parameter accepting DD-MM-YYYY or YYYY-MM-DD."""

    name = "date"

    def convert(self, value, param, ctx):
        if value is None or not isinstance(value, str):
            return value
        try:
            return parse_day(value)
        except (ValueError, OverflowError):
            self.fail(f"{value!r} is not a date (expected DD-MM-YYYY)", param, ctx)


DAY = DayParamType()


def get_scene_source(timeout=None, cache_root=None, cache_metadata=None, cache_bands=None):
    """Get an HTTP scene source backed by the local file cache."""
    cache = FileCache(HttpClient(timeout=timeout))
    return HttpSceneSource(
        cache,
        cache_root=cache_root,
        cache_metadata=cache_metadata,
        cache_bands=cache_bands,
    )


def print_summary(summary, result_path):
    """Print run statistics."""
    console.print("\n[bold cyan]Run Summary[/bold cyan]")
    console.print("=" * 60)
    console.print(f"Records processed: {summary.total}")
    console.print(f"Nighttime scenes saved: {summary.count(Outcome.DONE)}")
    console.print(f"Daytime scenes skipped: {summary.count(Outcome.DAYTIME)}")
    console.print(f"Outside date range: {summary.count(Outcome.FILTERED)}")
    console.print(f"Invalid records: {summary.count(Outcome.INVALID)}")
    failed = summary.count(Outcome.FAILED)
    style = "red" if failed else "green"
    console.print(f"[{style}]Failed scenes: {failed}[/{style}]")
    console.print(f"[bold]Results:[/bold] {summary.written} ids written to {result_path}")
    console.print("=" * 60)
