from __future__ import annotations
from typing import Optional, Tuple

from .cursor import Cursor
from .tags import Tag, in_family, width_of
from .scalar_codec import (
    read_binary,
    read_extended,
    read_fixext,
    read_float32,
    read_float64,
    read_int,
    read_str_or_bin,
    read_uint,
)
from .container_codec import read_array, read_map
from ..errors import DepthLimitExceeded, InsufficientData, InvalidData
from msgunpack.models.options import DecodeOptions
from msgunpack.models.value import Bool, Int, Nil, UInt, Value


def decode(
    cur: Cursor,
    compatibility: bool = False,
    *,
    max_depth: Optional[int] = None,
) -> Tuple[Value, Cursor]:
    """
    Decode one value starting at the cursor's position.
    Returns the value and the same cursor, advanced past the value's encoding.
    """
    opts = DecodeOptions(compatibility=compatibility, max_depth=max_depth)
    return decode_root(cur, opts), cur


def decode_root(cur: Cursor, opts: DecodeOptions) -> Value:
    """Decode one top-level value; nesting too deep for the interpreter stack is reported as DepthLimitExceeded."""
    start = cur.tell()
    try:
        return decode_next(cur, opts, 0)
    except RecursionError as e:
        raise DepthLimitExceeded(f"nesting too deep to decode value at {start}") from e


def decode_next(cur: Cursor, opts: DecodeOptions, depth: int) -> Value:
    """Read one tag byte and dispatch on its family. `depth` is the enclosing container level."""
    if cur.is_empty():
        raise InsufficientData(f"no tag byte at {cur.tell()}")
    at = cur.tell()
    tag = cur.take_one()

    # ---- fixed families: size/value inside the tag ----
    if tag <= Tag.POS_FIXINT[1]:
        return UInt(value=tag)
    if in_family(tag, Tag.NEG_FIXINT):
        return Int(value=tag - 0x100)
    if in_family(tag, Tag.FIXMAP):
        return read_map(cur, tag - Tag.FIXMAP[0], opts, depth)
    if in_family(tag, Tag.FIXARRAY):
        return read_array(cur, tag - Tag.FIXARRAY[0], opts, depth)
    if in_family(tag, Tag.FIXSTR):
        return read_str_or_bin(cur, tag - Tag.FIXSTR[0], opts.compatibility)

    # ---- single-byte constants ----
    if tag == Tag.NIL:
        return Nil()
    if tag == Tag.UNUSED:
        raise InvalidData(f"reserved tag 0x{tag:02x} at {at}")
    if tag == Tag.FALSE:
        return Bool(value=False)
    if tag == Tag.TRUE:
        return Bool(value=True)

    # ---- length-prefixed scalars ----
    if in_family(tag, Tag.BIN):
        length = cur.take_uint(width_of(tag, Tag.BIN))
        return read_binary(cur, length)
    if in_family(tag, Tag.EXT):
        return read_extended(cur, width_of(tag, Tag.EXT))
    if in_family(tag, Tag.STR):
        length = cur.take_uint(width_of(tag, Tag.STR))
        return read_str_or_bin(cur, length, opts.compatibility)

    # ---- fixed-width numbers ----
    if tag == Tag.FLOAT32:
        return read_float32(cur)
    if tag == Tag.FLOAT64:
        return read_float64(cur)
    if in_family(tag, Tag.UINT):
        return read_uint(cur, width_of(tag, Tag.UINT))
    if tag == Tag.INT8:
        return read_int(cur, 1)
    if in_family(tag, Tag.INT):
        return read_int(cur, width_of(tag, Tag.INT, base=2))
    if in_family(tag, Tag.FIXEXT):
        return read_fixext(cur, width_of(tag, Tag.FIXEXT))

    # ---- length-prefixed containers ----
    if in_family(tag, Tag.ARRAY):
        count = cur.take_uint(width_of(tag, Tag.ARRAY, base=2))
        return read_array(cur, count, opts, depth)
    if in_family(tag, Tag.MAP):
        count = cur.take_uint(width_of(tag, Tag.MAP, base=2))
        return read_map(cur, count, opts, depth)

    # every byte is assigned above
    raise InvalidData(f"unknown tag 0x{tag:02x} at {at}")
