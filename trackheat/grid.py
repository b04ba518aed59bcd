#!/usr/bin/env python3
"""
Occupancy grid for track points.
Maps each (lat, lon) sample onto a rows x cols grid sized to the requested
output resolution and counts how many samples land in each cell.
"""

import math
from typing import List, Optional, Tuple

from .bounds import BoundingBox, compute_bounding_box
from .track import Track, Trackpoint


class Grid:
    """A rows x cols array of non-negative point counts.

    Cells are stored in one flat list addressed by ``row * cols + col``.
    Row 0 is the northernmost row, column 0 the westernmost.
    """

    def __init__(self, rows: int, cols: int):
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid needs at least one row and one column, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.cells = [0] * (rows * cols)

    def get(self, row: int, col: int) -> int:
        return self.cells[self._index(row, col)]

    def increment(self, row: int, col: int, amount: int = 1) -> None:
        self.cells[self._index(row, col)] += amount

    def total(self) -> int:
        """Sum of all cell counts."""
        return sum(self.cells)

    def max_count(self) -> int:
        return max(self.cells)

    def to_rows(self) -> List[List[int]]:
        """Copy the counts out as a list of rows, north to south."""
        return [self.cells[r * self.cols:(r + 1) * self.cols] for r in range(self.rows)]

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Cell ({row}, {col}) outside {self.rows}x{self.cols} grid")
        return row * self.cols + col

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.rows, self.cols, self.cells) == (other.rows, other.cols, other.cells)

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, total={self.total()})"


def grid_dimensions(width: float, height: float) -> Tuple[int, int]:
    """Truncate requested pixel width/height to (rows, cols), at least 1 each."""
    cols = max(1, int(math.floor(width)))
    rows = max(1, int(math.floor(height)))
    return rows, cols


def normalise(value: float, low: float, high: float) -> float:
    """Position of value within [low, high] as a fraction in 0..1.

    A zero span is treated as a span of 1, so the value maps to 0. Spans too
    wide for a float (e.g. -1e308 .. 1e308) are computed on halved values.
    """
    span = high - low
    if not math.isfinite(span):
        value, low, high = value / 2, low / 2, high / 2
        span = high - low
    if span <= 0:
        return 0.0
    position = (value - low) / span
    return position if math.isfinite(position) else 0.0


def cell_for_point(point: Trackpoint, bbox: BoundingBox, rows: int, cols: int) -> Tuple[int, int]:
    """Map one point to its (row, col) cell.

    Points on the max latitude/longitude edges fall into the last row/column
    rather than one past it. A zero span in either axis maps the point to
    u = 0 / v = 0. For latitude that means the bottom (southernmost) row, not
    row 0, since v = 0 is south after the north-up inversion.
    """
    u = normalise(point.longitude, bbox.lon_min, bbox.lon_max)
    v = normalise(point.latitude, bbox.lat_min, bbox.lat_max)

    col = min(max(int(math.floor(u * cols)), 0), cols - 1)
    # North at the top
    row = min(max(int(math.floor((1 - v) * rows)), 0), rows - 1)
    return row, col


def bin_track(track: Track, width: float, height: float,
              bbox: Optional[BoundingBox] = None) -> Grid:
    """Count the track's points into a grid of the requested size.

    Args:
        track: Track whose points are binned. Segment boundaries are ignored.
        width: Requested output width in columns (truncated to an int).
        height: Requested output height in rows (truncated to an int).
        bbox: Precomputed bounding box. Computed from the track when omitted.

    Returns:
        A fully populated Grid. An empty track yields an all-zero grid.
    """
    rows, cols = grid_dimensions(width, height)
    grid = Grid(rows, cols)

    if bbox is None:
        bbox = compute_bounding_box(track)
    if bbox is None:
        return grid

    for point in track.points():
        row, col = cell_for_point(point, bbox, rows, cols)
        grid.increment(row, col)

    return grid
