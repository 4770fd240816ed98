from __future__ import annotations
from typing import Optional

from ..errors import InsufficientData, InvalidArgument

class Cursor:
    """
    Forward-only view over an immutable byte buffer.
    The buffer is wrapped in a memoryview and never copied; `take_range`
    hands out slices that alias it, `take_bytes` hands out owned copies.
    """
    __slots__ = ("buf", "pos")

    def __init__(self, data: bytes | bytearray | memoryview):
        buf = memoryview(data)
        if buf.format != "B" or buf.ndim != 1:
            buf = buf.cast("B")
        self.buf = buf
        self.pos = 0

    def remaining(self) -> int: return len(self.buf) - self.pos
    def is_empty(self) -> bool: return self.pos >= len(self.buf)
    def tell(self) -> int: return self.pos

    def peek(self) -> Optional[int]:
        if self.is_empty(): return None
        return self.buf[self.pos]

    def take_one(self) -> int:
        # caller checks is_empty() first
        v = self.buf[self.pos]
        self.pos += 1
        return v

    def _need(self, n: int) -> None:
        if n > self.remaining():
            raise InsufficientData(f"underrun: need {n} at {self.pos}, have {self.remaining()}")

    def take_range(self, n: int) -> memoryview:
        if n < 0: raise InvalidArgument(f"negative length {n} at {self.pos}")
        self._need(n)
        end = self.pos + n
        out = self.buf[self.pos:end]
        self.pos = end
        return out

    def take_bytes(self, n: int) -> bytes:
        return self.take_range(n).tobytes()

    # big-endian fixed-width reads, assembled byte by byte
    def take_uint(self, n: int) -> int:
        if n <= 0: raise InvalidArgument(f"integer width must be positive, got {n}")
        self._need(n)
        value = 0
        for _ in range(n):
            value = (value << 8) | self.take_one()
        return value

    def take_int(self, n: int) -> int:
        v = self.take_uint(n)
        sign = 1 << (n * 8 - 1)
        return v - (sign << 1) if v & sign else v
