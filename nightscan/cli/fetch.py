"""Scene list processing command."""
import click

from nightscan.config import config
from nightscan.cli.common import DAY, console, get_scene_source, print_summary
from nightscan.downloaders.worker import SceneWorker
from nightscan.pipeline import run_pipeline
from nightscan.storage.catalog import CatalogError
from nightscan.utils.logs import configure_logging


@click.command(name="fetch")
@click.option("-f", "--from", "date_from", type=DAY, default=None, help="Lookup scenes starting from this day (DD-MM-YYYY).")
@click.option("-t", "--to", "date_to", type=DAY, default=None, help="Lookup scenes no later than this day (DD-MM-YYYY).")
@click.option("-n", "--workers", type=int, default=None, help="Number of simultaneous parallel downloads.")
@click.option("-s", "--scene-list", type=click.Path(dir_okay=False), default=None, help="Scene list file (.csv or .gz).")
@click.option("-r", "--result", type=click.Path(dir_okay=False), default=None, help="File receiving the ids of saved scenes.")
@click.option("-b", "--band", "bands", type=int, multiple=True, help="Band to download; repeat for several bands.")
@click.option("--bqa", is_flag=True, help="Download the BQA quality raster.")
@click.option("-p", "--download-root", type=click.Path(file_okay=False), default=None, help="Path where data will be stored.")
@click.option("--timeout", type=float, default=None, help="HTTP request timeout in seconds.")
@click.option("--retries", type=int, default=None, help="Attempts per download before a scene is abandoned.")
@click.option("--cache-root", type=click.Path(file_okay=False), default=None, help="Root of the artifact cache.")
@click.option("--no-cache-meta", is_flag=True, help="Do not cache MTL metadata files.")
@click.option("--cache-bands", is_flag=True, help="Cache BQA and band rasters.")
@click.option("--log-level", default=None, help="Logging level (default from config).")
def fetch(
    date_from,
    date_to,
    workers,
    scene_list,
    result,
    bands,
    bqa,
    download_root,
    timeout,
    retries,
    cache_root,
    no_cache_meta,
    cache_bands,
    log_level,
):
    """Download nighttime scenes listed in a scene list."""
    configure_logging(log_level)

    workers = workers if workers is not None else config.workers
    if workers <= 0:
        workers = 1

    scene_list = scene_list or config.scene_list
    result = result or config.result_path

    source = get_scene_source(
        timeout=timeout,
        cache_root=cache_root,
        cache_metadata=False if no_cache_meta else None,
        cache_bands=True if cache_bands else None,
    )
    worker = SceneWorker(
        source,
        download_root=download_root,
        date_from=date_from,
        date_to=date_to,
        bands=bands,
        bqa=bqa,
        retries=retries,
    )

    console.print(f"[bold]Scene list:[/bold] {scene_list}")
    if date_from or date_to:
        start = date_from.date() if date_from else "-"
        end = date_to.date() if date_to else "-"
        console.print(f"[bold]Date Range:[/bold] {start} to {end}")
    if bands:
        console.print(f"[bold]Bands:[/bold] {', '.join(str(b) for b in bands)}")

    try:
        summary = run_pipeline(scene_list, result, worker, workers)
    except CatalogError as e:
        raise click.ClickException(str(e))
    except OSError as e:
        raise click.ClickException(f"Run aborted: {e}")
    finally:
        source.cache.client.close()

    print_summary(summary, result)
