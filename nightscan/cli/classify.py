"""Local metadata inspection command."""
import click

from nightscan.cli.common import console
from nightscan.utils.mtl import is_daytime, read_sun_elevation


@click.command(name="classify")
@click.argument("mtl_files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def classify(mtl_files):
    """Show sun elevation and day/night class of local MTL files."""
    for path in mtl_files:
        with open(path, "rb") as f:
            elevation = read_sun_elevation(f)

        label = "day" if is_daytime(elevation) else "night"
        shown = "missing" if elevation is None else f"{elevation:g}"
        style = "yellow" if label == "day" else "cyan"
        console.print(f"{path}: SUN_ELEVATION {shown} -> [{style}]{label}[/{style}]", soft_wrap=True)
