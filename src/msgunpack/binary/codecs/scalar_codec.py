from __future__ import annotations
import struct

from msgunpack.binary.codecs.cursor import Cursor
from msgunpack.binary.errors import InsufficientData, InvalidData
from msgunpack.models.value import Binary, Double, Extended, Float, Int, String, UInt


def read_uint(cur: Cursor, width: int) -> UInt:
    return UInt(value=cur.take_uint(width))

def read_int(cur: Cursor, width: int) -> Int:
    return Int(value=cur.take_int(width))


# floats: assemble the bit pattern big-endian, then reinterpret it
def read_float32(cur: Cursor) -> Float:
    bits = cur.take_uint(4)
    return Float(value=struct.unpack(">f", bits.to_bytes(4, "big"))[0])

def read_float64(cur: Cursor) -> Double:
    bits = cur.take_uint(8)
    return Double(value=struct.unpack(">d", bits.to_bytes(8, "big"))[0])


def read_string(cur: Cursor, length: int) -> String:
    if length == 0:
        return String(value="")
    start = cur.tell()
    raw = cur.take_range(length)
    try:
        text = str(raw, "utf-8")
    except UnicodeDecodeError as e:
        raise InvalidData(f"invalid utf-8 in string of {length} bytes at {start}: {e.reason}") from e
    return String(value=text)

def read_binary(cur: Cursor, length: int) -> Binary:
    if length == 0:
        return Binary(value=b"")
    return Binary(value=cur.take_bytes(length))

def read_str_or_bin(cur: Cursor, length: int, compatibility: bool) -> String | Binary:
    """String-tag payload: raw bytes in compatibility mode, UTF-8 text otherwise."""
    if compatibility:
        return read_binary(cur, length)
    return read_string(cur, length)


def _ext_type(cur: Cursor) -> int:
    if cur.is_empty():
        raise InsufficientData(f"missing extension type byte at {cur.tell()}")
    b = cur.take_one()
    return b - 0x100 if b & 0x80 else b

def read_extended(cur: Cursor, length_width: int) -> Extended:
    """ext 8/16/32: length field, then signed type byte, then payload."""
    length = cur.take_uint(length_width)
    ext_type = _ext_type(cur)
    return Extended(type=ext_type, data=cur.take_bytes(length))

def read_fixext(cur: Cursor, size: int) -> Extended:
    ext_type = _ext_type(cur)
    return Extended(type=ext_type, data=cur.take_bytes(size))
