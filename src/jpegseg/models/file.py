from __future__ import annotations
from pathlib import Path
from pydantic import BaseModel, Field
from typing import List
from .segment import Segment

class JpegFile(BaseModel):
    segments: List[Segment] = Field(default_factory=list)

    @classmethod
    def from_binary(cls, data: bytes | str | Path) -> "JpegFile":
        from ..binary.reader import parse_file
        return parse_file(data)

    def to_binary(self) -> bytes:
        from ..binary.writer import write_file
        return write_file(self)
