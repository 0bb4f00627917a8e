from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Union

from .codecs.bitcursor import Cursor
from .codecs.segment_codec import decode_segment
from .errors import SegmentError, StreamError

from jpegseg.models.common import Marker
from jpegseg.models.file import JpegFile
from jpegseg.models.segment import Segment

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]
Source = Union[str, Path, BytesLike]


# -----------------------------
# Helpers
# -----------------------------

def _load_bytes(inp: Source) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    p = Path(str(inp))
    return p.read_bytes()


# -----------------------------
# Streaming iterator
# -----------------------------

def iter_segments(data: BytesLike) -> Iterator[Segment]:
    """
    Yield segments in wire order until the buffer is exactly exhausted.
    Raises StreamError at the first segment that cannot be read; every
    segment before it has already been yielded.
    """
    cur = Cursor(data)
    segments_parsed = 0

    while cur.remaining() > 0:
        seg_start = cur.tell()
        try:
            segment = decode_segment(cur)
        except SegmentError as e:
            logger.debug("segment %d at offset %d failed: %s", segments_parsed, seg_start, e)
            raise StreamError(seg_start, segments_parsed, e) from e
        logger.debug(
            "segment %d at offset %d: %s (%d bytes)",
            segments_parsed, seg_start, segment.marker.name, segment.size,
        )
        segments_parsed += 1
        yield segment


# -----------------------------
# Full parse
# -----------------------------

def parse_segments(data: BytesLike) -> List[Segment]:
    """
    Decode a whole buffer into its ordered list of segments.
    An empty buffer is a valid, empty stream.
    """
    return list(iter_segments(data))


def parse_file(data: Source) -> JpegFile:
    """Load (if given a path) and fully parse a file into a JpegFile model."""
    raw = _load_bytes(data)
    return JpegFile(segments=parse_segments(raw))


# -----------------------------
# Summary
# -----------------------------

def summarize_file(data: Source) -> Dict[Marker, int]:
    """
    Count segments per marker, in order of first appearance.
    Raises StreamError like parse_segments does.
    """
    raw = _load_bytes(data)
    counts: Dict[Marker, int] = {}
    for segment in iter_segments(raw):
        counts[segment.marker] = counts.get(segment.marker, 0) + 1
    return counts
