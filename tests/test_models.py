import pytest
from pydantic import ValidationError

from jpegseg.models.common import Marker
from jpegseg.models.file import JpegFile
from jpegseg.models.segment import Segment

def test_standalone_rejects_payload():
    with pytest.raises(ValidationError):
        Segment(marker=Marker.START_OF_IMAGE, payload=b"\x00")

def test_length_delimited_requires_payload():
    with pytest.raises(ValidationError):
        Segment(marker=Marker.COMMENT)

def test_segment_is_frozen():
    seg = Segment(marker=Marker.COMMENT, payload=b"hi")
    with pytest.raises(ValidationError):
        seg.payload = b"bye"

def test_size_and_summary():
    soi = Segment(marker=Marker.START_OF_IMAGE)
    com = Segment(marker=Marker.COMMENT, payload=b"\x01\x02\x03")
    assert soi.size == 2
    assert com.size == 7
    assert soi.summary() == "{ marker : Start of Image, data : None }"
    assert com.summary() == "{ marker : Comment, data : 3 bytes }"

def test_json_dump():
    com = Segment(marker=Marker.COMMENT, payload=b"\xab\xcd")
    assert com.model_dump(mode="json") == {"marker": "COMMENT", "payload": "abcd"}
    eoi = Segment(marker=Marker.END_OF_IMAGE)
    assert eoi.model_dump(mode="json") == {"marker": "END_OF_IMAGE", "payload": None}
    # python mode keeps the raw values
    assert com.model_dump()["payload"] == b"\xab\xcd"

def test_json_round_trip():
    f = JpegFile(segments=[
        Segment(marker=Marker.START_OF_IMAGE),
        Segment(marker=Marker.COMMENT, payload=b"\x01\x23\x45"),
        Segment(marker=Marker.DEFINE_HUFFMAN_TABLE, payload=b""),
        Segment(marker=Marker.END_OF_IMAGE),
    ])
    g = JpegFile.model_validate_json(f.model_dump_json())
    assert g == f
    assert g.segments[1].payload == b"\x01\x23\x45"

def test_json_accepts_marker_name_and_hex_payload():
    seg = Segment.model_validate_json('{"marker": "COMMENT", "payload": "abcd"}')
    assert seg == Segment(marker=Marker.COMMENT, payload=b"\xab\xcd")

def test_json_rejects_unknown_marker_name():
    with pytest.raises(ValidationError):
        Segment.model_validate_json('{"marker": "APP0", "payload": ""}')
