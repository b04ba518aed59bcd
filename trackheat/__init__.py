"""Trackheat - Terminal density heatmaps for GPS tracks"""

__version__ = "0.1.0"
__description__ = "Render GPS tracks as text density heatmaps in the terminal"

from .track import Track, Trackpoint
from .bounds import BoundingBox, compute_bounding_box
from .grid import Grid, bin_track
from .symbols import map_symbols, symbol_for_count
from .config import ConfigurationError, HeatmapConfig

__all__ = [
    'Track', 'Trackpoint', 'BoundingBox', 'compute_bounding_box',
    'Grid', 'bin_track', 'map_symbols', 'symbol_for_count',
    'ConfigurationError', 'HeatmapConfig',
]
