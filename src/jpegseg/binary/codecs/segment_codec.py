from __future__ import annotations
from .bitcursor import Cursor
from .marker import encode_marker
from .segment_header import decode_segment_header
from jpegseg.binary.errors import TooFewDataBytesError
from jpegseg.models.segment import Segment

MAX_PAYLOAD = 0xFFFF - 2

def decode_segment(cur: Cursor) -> Segment:
    """
    Decode one segment starting at the cursor and advance past it.
    Raises a SegmentError subclass if the bytes at the cursor are not a
    complete segment; the cursor position is unspecified afterwards.
    """
    marker, length = decode_segment_header(cur)
    if length is None:
        return Segment(marker=marker)

    payload_len = length - 2
    if cur.remaining() < payload_len:
        raise TooFewDataBytesError(payload_len, cur.remaining())
    return Segment(marker=marker, payload=cur.take(payload_len))

def read_segment(data: bytes | bytearray | memoryview) -> tuple[Segment, int]:
    """Read the segment at the start of `data`. Returns (segment, bytes consumed)."""
    cur = Cursor(data)
    segment = decode_segment(cur)
    return segment, cur.tell()

def encode_segment(segment: Segment) -> bytes:
    out = bytearray(encode_marker(segment.marker))
    if segment.payload is None:
        return bytes(out)
    if len(segment.payload) > MAX_PAYLOAD:
        raise ValueError(
            f"{segment.marker.display_name} payload of {len(segment.payload)} bytes "
            f"does not fit a 16-bit length field (max {MAX_PAYLOAD})"
        )
    out += (len(segment.payload) + 2).to_bytes(2, "big")
    out += segment.payload
    return bytes(out)
