"""Bounding box over all points of a track."""

from dataclasses import dataclass
from typing import Optional

from .track import Track


@dataclass(frozen=True)
class BoundingBox:
    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float


def compute_bounding_box(track: Track) -> Optional[BoundingBox]:
    """Scan every point in every segment for min/max latitude and longitude.

    Segment boundaries play no part; only the flat union of points matters.

    Returns:
        The bounding box, or None if the track holds no points at all.
    """
    lat_min = lat_max = lon_min = lon_max = None
    for point in track.points():
        if lat_min is None:
            lat_min = lat_max = point.latitude
            lon_min = lon_max = point.longitude
            continue
        lat_min = min(lat_min, point.latitude)
        lat_max = max(lat_max, point.latitude)
        lon_min = min(lon_min, point.longitude)
        lon_max = max(lon_max, point.longitude)

    if lat_min is None:
        return None
    return BoundingBox(lat_min, lat_max, lon_min, lon_max)
