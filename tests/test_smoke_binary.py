from jpegseg.models.common import Marker
from jpegseg.models.file import JpegFile
from jpegseg.models.segment import Segment

def test_binary_roundtrips():
    data = b"\xff\xd8\xff\xfe\x00\x05\x01\x23\x45\xff\xd9"
    f = JpegFile.from_binary(data)
    assert [s.marker for s in f.segments] == [Marker.START_OF_IMAGE, Marker.COMMENT, Marker.END_OF_IMAGE]
    assert f.to_binary() == data

def test_empty_file():
    assert JpegFile.from_binary(b"") == JpegFile()
    assert JpegFile(segments=[Segment(marker=Marker.START_OF_IMAGE)]).to_binary() == b"\xff\xd8"
