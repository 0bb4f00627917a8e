from __future__ import annotations
from typing import Iterable
from .codecs.segment_codec import encode_segment
from jpegseg.models.file import JpegFile
from jpegseg.models.segment import Segment

def write_segments(segments: Iterable[Segment]) -> bytes:
    """Concatenate encoded segments with no padding between them."""
    return b"".join(encode_segment(s) for s in segments)

def write_file(file: JpegFile) -> bytes:
    return write_segments(file.segments)
