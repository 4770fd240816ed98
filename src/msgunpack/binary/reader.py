from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple, Union

from .codecs.cursor import Cursor
from .codecs.value_codec import decode_root
from msgunpack.models.options import DecodeOptions
from msgunpack.models.value import Value

log = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


# -----------------------------
# Helpers
# -----------------------------

def _open_cursor(data: BytesLike) -> Cursor:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
    if isinstance(data, memoryview) and not data.c_contiguous:
        raise TypeError("expected a contiguous bytes-like object, got a non-contiguous memoryview")
    return Cursor(data)


# -----------------------------
# Single value
# -----------------------------

def decode_prefix(
    data: BytesLike,
    compatibility: bool = False,
    *,
    max_depth: Optional[int] = None,
) -> Tuple[Value, Cursor]:
    """
    Decode the first value in `data`. The returned cursor sits just past it,
    so `cursor.remaining()` is the number of trailing bytes left untouched.
    """
    opts = DecodeOptions(compatibility=compatibility, max_depth=max_depth)
    cur = _open_cursor(data)
    value = decode_root(cur, opts)
    log.debug("decoded %s from %d of %d bytes", value.kind, cur.tell(), len(cur.buf))
    return value, cur


def decode_one(
    data: BytesLike,
    compatibility: bool = False,
    *,
    max_depth: Optional[int] = None,
) -> Value:
    """Decode exactly one value; trailing bytes are ignored."""
    value, _ = decode_prefix(data, compatibility, max_depth=max_depth)
    return value


# -----------------------------
# Concatenated values
# -----------------------------

def iter_values(
    data: BytesLike,
    compatibility: bool = False,
    *,
    max_depth: Optional[int] = None,
) -> Iterator[Value]:
    """
    Stream top-level values from a buffer holding several encodings back to back.
    Stops when the buffer is exhausted; a truncated final value raises InsufficientData.
    """
    opts = DecodeOptions(compatibility=compatibility, max_depth=max_depth)
    cur = _open_cursor(data)
    while not cur.is_empty():
        yield decode_root(cur, opts)


def decode_all(
    data: BytesLike,
    compatibility: bool = False,
    *,
    max_depth: Optional[int] = None,
) -> List[Value]:
    """Decode every top-level value in order. Any failure aborts the whole call."""
    values = list(iter_values(data, compatibility, max_depth=max_depth))
    log.debug("decoded %d top-level values from %d bytes", len(values), memoryview(data).nbytes)
    return values
