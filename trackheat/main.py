#!/usr/bin/env python3

import logging
import sys
from typing import Optional

import click

from . import __version__
from .bounds import compute_bounding_box
from .config import DEFAULT_CONFIG_FILE, ConfigurationError, resolve_config
from .grid import bin_track
from .ingest import load_track
from .renderer import print_heatmap, render_summary
from .symbols import map_symbols

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.argument('width', required=False)
@click.argument('height', required=False)
@click.argument('alphabet', required=False)
@click.argument('bucket_size', required=False)
@click.option('--input', '-i', 'input_path', default='-', help='Track file to read ("-" for stdin)')
@click.option('--config', '-c', default=DEFAULT_CONFIG_FILE, help='Config file path')
@click.option('--summary', is_flag=True, help='Print a track/grid summary table to stderr')
@click.option('--verbose', '-v', is_flag=True, help='Log debug output to stderr')
@click.option('--version', is_flag=True, is_eager=True, expose_value=False,
              callback=lambda ctx, param, value: (click.echo(f"trackheat, version {__version__}"), ctx.exit()) if value else None,
              help='Show the version and exit.')
def main(width: Optional[str], height: Optional[str], alphabet: Optional[str], bucket_size: Optional[str],
         input_path: str, config: str, summary: bool, verbose: bool):
    """Render a GPS track as a text density heatmap.

    WIDTH / HEIGHT: Output size in columns / rows (e.g., 60) or percentage of terminal (e.g., "80%")
    ALPHABET: Symbols ordered sparsest to densest (e.g., " .:#")
    (use -- before the arguments if ALPHABET starts with "-", e.g. trackheat -- 60 20 "-=#" 1)
    BUCKET_SIZE: Number of points per symbol step

    The track is read as "<lat> <lon> <timestamp>" lines; a blank line starts a
    new segment. Omitted arguments fall back to the config file, then defaults.

      trackheat 60 20 " .:-=+*#%@" 2 < ride.txt
    """
    configure_logging(verbose)

    try:
        settings = resolve_config(width, height, alphabet, bucket_size, config_path=config)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    try:
        track = load_track(input_path)
    except OSError as e:
        click.echo(f"Error: Could not read track: {e}", err=True)
        sys.exit(1)

    bbox = compute_bounding_box(track)
    grid = bin_track(track, settings.width, settings.height, bbox)
    logger.debug("Binned %d point(s) into %r", track.point_count, grid)

    print_heatmap(map_symbols(grid, settings.alphabet, settings.bucket_size))

    if summary:
        render_summary(track, bbox, grid)


if __name__ == "__main__":
    main()
