"""Bijection between a bounded integer domain and CJK ideograph codepoints.

Three contiguous Unicode blocks are used, densest first:

* CJK Extension B, ``U+20000..U+2A6DF`` (42720 codepoints)
* CJK Unified Ideographs, ``U+4E00..U+9FFF`` (20992 codepoints)
* CJK Extension A, ``U+3400..U+4DBF`` (6592 codepoints)

Together they give an alphabet of 70304 symbols, enough to carry any
16-bit integer in a single character.
"""
from __future__ import annotations

from typing import Final, Iterable, List, Tuple

from ..exceptions import OutOfRangeError

# (first codepoint, size) per block, in mapping order.
BLOCKS: Final[Tuple[Tuple[int, int], ...]] = (
    (0x20000, 42720),
    (0x4E00, 20992),
    (0x3400, 6592),
)

DOMAIN_SIZE: Final[int] = sum(size for _, size in BLOCKS)


def int_to_codepoint(value: int) -> int:
    """Return the codepoint carrying *value*.

    Raises:
        OutOfRangeError: If *value* is negative or not below ``DOMAIN_SIZE``.
    """

    if value < 0:
        raise OutOfRangeError(f"value cannot be negative, got {value}")
    offset = value
    for start, size in BLOCKS:
        if offset < size:
            return start + offset
        offset -= size
    raise OutOfRangeError(f"value {value} is not below the alphabet size {DOMAIN_SIZE}")


def codepoint_to_int(codepoint: int) -> int:
    """Inverse of :func:`int_to_codepoint`."""

    base = 0
    for start, size in BLOCKS:
        if start <= codepoint < start + size:
            return codepoint - start + base
        base += size
    raise OutOfRangeError(f"illegal codepoint U+{codepoint:04X}")


def ints_to_codepoints(values: Iterable[int]) -> List[int]:
    return [int_to_codepoint(value) for value in values]


def codepoints_to_ints(codepoints: Iterable[int]) -> List[int]:
    return [codepoint_to_int(codepoint) for codepoint in codepoints]


__all__ = [
    "BLOCKS",
    "DOMAIN_SIZE",
    "codepoint_to_int",
    "codepoints_to_ints",
    "int_to_codepoint",
    "ints_to_codepoints",
]
