from __future__ import annotations
from enum import IntEnum

class Marker(IntEnum):
    """Known segment markers. The value is the 16-bit code as it appears on the wire."""
    DEFINE_HUFFMAN_TABLE = 0xFFC4
    START_OF_IMAGE = 0xFFD8
    END_OF_IMAGE = 0xFFD9
    START_OF_SCAN = 0xFFDA
    DEFINE_QUANTIZATION_TABLE = 0xFFDB
    COMMENT = 0xFFFE

    @property
    def code(self) -> bytes:
        return self.value.to_bytes(2, "big")

    @property
    def standalone(self) -> bool:
        # SOI/EOI are bare 2-byte tokens: no length field, no payload
        return self in (Marker.START_OF_IMAGE, Marker.END_OF_IMAGE)

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

_DISPLAY_NAMES = {
    Marker.DEFINE_HUFFMAN_TABLE: "Define Huffman Table",
    Marker.START_OF_IMAGE: "Start of Image",
    Marker.END_OF_IMAGE: "End of Image",
    Marker.START_OF_SCAN: "Start of Scan",
    Marker.DEFINE_QUANTIZATION_TABLE: "Define Quantization Table",
    Marker.COMMENT: "Comment",
}
