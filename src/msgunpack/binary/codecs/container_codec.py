from __future__ import annotations
from typing import List

from .cursor import Cursor
from ..errors import DepthLimitExceeded
from msgunpack.models.options import DecodeOptions
from msgunpack.models.value import Array, Map, Value


def _enter(cur: Cursor, opts: DecodeOptions, depth: int) -> int:
    """Return the nesting level of the container being opened."""
    level = depth + 1
    if opts.max_depth is not None and level > opts.max_depth:
        raise DepthLimitExceeded(f"nesting depth {level} exceeds max_depth={opts.max_depth} at {cur.tell()}")
    return level


def read_values(cur: Cursor, count: int, opts: DecodeOptions, depth: int) -> List[Value]:
    """
    Decode `count` consecutive values, threading the cursor through each call.
    The first failure propagates; nothing partial is returned.
    """
    # lazy import: the dispatcher imports this module
    from .value_codec import decode_next

    values: List[Value] = []
    for _ in range(count):
        values.append(decode_next(cur, opts, depth))
    return values


def read_array(cur: Cursor, count: int, opts: DecodeOptions, depth: int) -> Array:
    level = _enter(cur, opts, depth)
    return Array(items=read_values(cur, count, opts, level))


def read_map(cur: Cursor, count: int, opts: DecodeOptions, depth: int) -> Map:
    """Decode 2*count values flat, then pair them up; later duplicate keys win."""
    level = _enter(cur, opts, depth)
    flat = read_values(cur, 2 * count, opts, level)
    return Map.from_pairs(flat)
