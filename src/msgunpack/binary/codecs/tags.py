from __future__ import annotations

# Single-byte tags. Families that carry a size in the low bits of the tag
# are given as (first, last) closed ranges.

class Tag:
    POS_FIXINT = (0x00, 0x7F)
    FIXMAP = (0x80, 0x8F)
    FIXARRAY = (0x90, 0x9F)
    FIXSTR = (0xA0, 0xBF)
    NIL = 0xC0
    UNUSED = 0xC1
    FALSE = 0xC2
    TRUE = 0xC3
    BIN = (0xC4, 0xC6)        # bin 8/16/32
    EXT = (0xC7, 0xC9)        # ext 8/16/32
    FLOAT32 = 0xCA
    FLOAT64 = 0xCB
    UINT = (0xCC, 0xCF)       # uint 8/16/32/64
    INT8 = 0xD0
    INT = (0xD1, 0xD3)        # int 16/32/64
    FIXEXT = (0xD4, 0xD8)     # fixext 1/2/4/8/16
    STR = (0xD9, 0xDB)        # str 8/16/32
    ARRAY = (0xDC, 0xDD)      # array 16/32
    MAP = (0xDE, 0xDF)        # map 16/32
    NEG_FIXINT = (0xE0, 0xFF)


def in_family(tag: int, family: tuple[int, int]) -> bool:
    return family[0] <= tag <= family[1]


def width_of(tag: int, family: tuple[int, int], base: int = 1) -> int:
    """Byte width selected by a tag's position in its family: base, 2*base, 4*base..."""
    return base << (tag - family[0])
