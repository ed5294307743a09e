"""Main CLI application entry point."""
import click
from nightscan import __version__


@click.group()
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx):
    """nightscan - fetch nighttime Landsat scenes from a scene list."""
    ctx.ensure_object(dict)


# Import command modules
from nightscan.cli import classify, fetch

# Register commands
cli.add_command(fetch.fetch)
cli.add_command(classify.classify)


if __name__ == "__main__":
    cli()
