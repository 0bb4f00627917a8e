from __future__ import annotations
from jpegseg.binary.errors import (
    TooFewMarkerBytesError,
    TooManyMarkerBytesError,
    UnknownMarkerError,
)
from jpegseg.models.common import Marker

# 2-byte wire code -> Marker, built from the enum so the mapping stays bijective
_BY_CODE = {m.code: m for m in Marker}

def decode_marker(data: bytes | bytearray | memoryview) -> Marker:
    """Decode exactly two bytes into a Marker."""
    raw = bytes(data)
    if len(raw) > 2:
        raise TooManyMarkerBytesError()
    if len(raw) < 2:
        raise TooFewMarkerBytesError()
    try:
        return _BY_CODE[raw]
    except KeyError:
        raise UnknownMarkerError(raw[0], raw[1]) from None

def encode_marker(marker: Marker) -> bytes:
    return marker.code
