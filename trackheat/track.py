"""
Track model: an ordered list of segments, each an ordered list of trackpoints.
"""

from dataclasses import dataclass
from typing import Iterator, List


@dataclass(frozen=True)
class Trackpoint:
    """A single GPS sample."""
    latitude: float
    longitude: float
    timestamp: int


class Track:
    """Ordered collection of segments for one trace.

    A new track always starts with one empty segment, so points can be
    appended before any segment break has been seen.
    """

    def __init__(self):
        self.segments: List[List[Trackpoint]] = [[]]

    def add_point(self, point: Trackpoint) -> None:
        """Append a point to the current (last) segment."""
        self.segments[-1].append(point)

    def start_segment(self) -> None:
        """Close the current segment and open a new empty one.

        Called even when the current segment is empty, so consecutive breaks
        leave consecutive empty segments behind.
        """
        self.segments.append([])

    def points(self) -> Iterator[Trackpoint]:
        """Iterate over every point of every segment, in order."""
        for segment in self.segments:
            yield from segment

    @property
    def point_count(self) -> int:
        return sum(len(segment) for segment in self.segments)

    def __len__(self) -> int:
        return self.point_count

    def __repr__(self) -> str:
        return f"Track(segments={len(self.segments)}, points={self.point_count})"
