"""Read track records from line-oriented text.

Each line is either ``<lat> <lon> <timestamp>`` (extra fields ignored), a
blank line marking a segment break, or something else, which is skipped.
"""

import logging
import math
import re
import sys
from pathlib import Path
from typing import IO, Iterable, Iterator, Optional, Union

from .track import Track, Trackpoint

logger = logging.getLogger(__name__)


class SegmentBreak:
    """Marker record: start a new segment."""

    def __repr__(self) -> str:
        return "SEGMENT_BREAK"


SEGMENT_BREAK = SegmentBreak()

Record = Union[Trackpoint, SegmentBreak]

# Same leniency as scanf("%ld"): take the leading integer, ignore the rest
TIMESTAMP_PREFIX = re.compile(r"[+-]?\d+")


def parse_timestamp(field: str) -> int:
    """Leading integer of a timestamp field ("1700000000.5" -> 1700000000)."""
    match = TIMESTAMP_PREFIX.match(field)
    if match is None:
        raise ValueError(f"Invalid timestamp: {field!r}")
    return int(match.group())


def parse_record(line: str) -> Optional[Record]:
    """Parse one input line.

    Returns:
        A Trackpoint, SEGMENT_BREAK for a blank line, or None if the line
        is malformed. Non-finite coordinates (nan, inf) count as malformed.
    """
    if line.rstrip('\r\n') == '':
        return SEGMENT_BREAK

    fields = line.split()
    if len(fields) < 3:
        return None
    try:
        latitude = float(fields[0])
        longitude = float(fields[1])
        timestamp = parse_timestamp(fields[2])
    except ValueError:
        return None
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        return None
    return Trackpoint(latitude, longitude, timestamp)


def iter_records(lines: Iterable[str]) -> Iterator[Record]:
    """Yield parsed records lazily, dropping malformed lines."""
    skipped = 0
    for line_no, line in enumerate(lines, start=1):
        record = parse_record(line)
        if record is None:
            skipped += 1
            logger.debug("Skipping malformed line %d: %r", line_no, line.rstrip('\r\n'))
            continue
        yield record
    if skipped:
        logger.warning("Skipped %d malformed line(s)", skipped)


def build_track(records: Iterable[Record]) -> Track:
    """Fold a record sequence into a Track."""
    track = Track()
    for record in records:
        if isinstance(record, SegmentBreak):
            track.start_segment()
        else:
            track.add_point(record)
    return track


def load_track(source: Union[str, Path, IO[str], None] = None) -> Track:
    """Read a whole track from a path, an open text stream, or stdin.

    Args:
        source: File path, open text stream, or None / "-" for stdin
    """
    if source is None or source == '-':
        stdin = sys.stdin
        # Undecodable bytes become U+FFFD and the line fails to parse
        if hasattr(stdin, 'reconfigure'):
            stdin.reconfigure(errors='replace')
        return build_track(iter_records(stdin))
    if isinstance(source, (str, Path)):
        with open(source, 'r', encoding='utf-8', errors='replace') as f:
            track = build_track(iter_records(f))
        logger.debug("Loaded %r from %s", track, source)
        return track
    return build_track(iter_records(source))
