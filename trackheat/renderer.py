"""Output for symbol grids and track summaries."""

from typing import List, Optional, Sequence

import click
from rich import box
from rich.console import Console
from rich.table import Table

from .bounds import BoundingBox
from .grid import Grid
from .track import Track


def render_symbols(symbol_rows: Sequence[Sequence[str]]) -> str:
    """Join each row into one line, each line ending in a newline, top row first."""
    return "".join("".join(row) + "\n" for row in symbol_rows)


def print_heatmap(symbol_rows: Sequence[Sequence[str]]) -> None:
    click.echo(render_symbols(symbol_rows), nl=False)


def summary_rows(track: Track, bbox: Optional[BoundingBox], grid: Grid) -> List[List[str]]:
    """Label/value pairs describing one render."""
    rows = [
        ["Segments", str(len(track.segments))],
        ["Points", str(track.point_count)],
    ]
    if bbox is not None:
        rows.append(["Latitude", f"{bbox.lat_min:.6f} .. {bbox.lat_max:.6f}"])
        rows.append(["Longitude", f"{bbox.lon_min:.6f} .. {bbox.lon_max:.6f}"])
    else:
        rows.append(["Bounds", "n/a (empty track)"])
    rows.append(["Grid", f"{grid.rows} rows x {grid.cols} cols"])
    rows.append(["Busiest cell", str(grid.max_count())])
    return rows


def render_summary(track: Track, bbox: Optional[BoundingBox], grid: Grid,
                   console: Optional[Console] = None) -> None:
    """Print a summary table of the track and grid (to stderr by default)."""
    if console is None:
        console = Console(stderr=True)

    table = Table(title="Track Summary", box=box.ROUNDED)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green", overflow="fold")
    for label, value in summary_rows(track, bbox, grid):
        table.add_row(label, value)

    console.print(table)
