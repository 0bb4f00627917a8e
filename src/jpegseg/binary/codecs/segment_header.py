from __future__ import annotations
from .bitcursor import Cursor
from .marker import decode_marker
from jpegseg.binary.errors import (
    InvalidMarkerError,
    LengthLessThanTwoError,
    MarkerError,
    NoLengthBytesError,
    TooFewSegmentBytesError,
)
from jpegseg.models.common import Marker

def decode_segment_header(cur: Cursor) -> tuple[Marker, int | None]:
    """
    Segment header: 2-byte marker, then (unless the marker is standalone)
    a big-endian u16 length that counts itself but not the marker.
    Returns (marker, length); length is None for SOI/EOI.
    Leaves the cursor at the first payload byte (or the next segment).
    """
    rem = cur.remaining()
    if rem < 2:
        raise TooFewSegmentBytesError(rem)
    try:
        marker = decode_marker(cur.peek(2))
    except MarkerError as e:
        raise InvalidMarkerError(e) from e
    if marker.standalone:
        cur.skip(2)
        return marker, None

    if rem < 4:
        raise NoLengthBytesError()
    cur.skip(2)
    length = cur.u16()
    if length < 2:
        raise LengthLessThanTwoError(length)
    return marker, length
