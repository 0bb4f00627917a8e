from __future__ import annotations
import struct

class Cursor:
    """Forward-only reader over an immutable view of the input buffer."""
    __slots__ = ("buf", "pos")

    def __init__(self, data: bytes | bytearray | memoryview):
        self.buf = memoryview(data)
        self.pos = 0

    def remaining(self) -> int: return len(self.buf) - self.pos
    def tell(self) -> int: return self.pos

    def skip(self, n: int) -> None:
        if n > self.remaining(): raise ValueError(f"skip underrun: need {n} at {self.pos}")
        self.pos += n

    def take(self, n: int) -> bytes:
        end = self.pos + n
        if end > len(self.buf): raise ValueError(f"underrun: need {n} at {self.pos}")
        out = self.buf[self.pos:end].tobytes()
        self.pos = end
        return out

    def peek(self, n: int) -> bytes:
        end = self.pos + n
        if end > len(self.buf): raise ValueError("peek underrun")
        return self.buf[self.pos:end].tobytes()

    # byte-aligned big-endian reads
    def u16(self) -> int: return struct.unpack(">H", self.take(2))[0]
