"""Grouping of raw bytes into unsigned 16-bit integers and back."""
from __future__ import annotations

from typing import Iterable, List

from ..exceptions import InvalidInputError

INT_WIDTH = 2
INT_MASK = 0xFFFF


def two_bytes_to_int(pair: bytes) -> int:
    """Decode a two byte little-endian group as an unsigned integer."""

    if len(pair) != INT_WIDTH:
        raise InvalidInputError(f"expected {INT_WIDTH} bytes, got {len(pair)}")
    return int.from_bytes(pair, "little", signed=False)


def int_to_two_bytes(value: int) -> bytes:
    """Encode the low 16 bits of *value*, low byte first."""

    return (value & INT_MASK).to_bytes(INT_WIDTH, "little")


def bytes_to_ints(data: bytes) -> List[int]:
    """Split *data* into little-endian 16-bit integers.

    Raises:
        InvalidInputError: If *data* has an odd length.
    """

    if len(data) % INT_WIDTH:
        raise InvalidInputError("byte sequence must have an even length")
    return [two_bytes_to_int(data[i : i + INT_WIDTH]) for i in range(0, len(data), INT_WIDTH)]


def ints_to_bytes(values: Iterable[int]) -> bytes:
    """Inverse of :func:`bytes_to_ints`."""

    return b"".join(int_to_two_bytes(value) for value in values)


__all__ = ["INT_MASK", "INT_WIDTH", "bytes_to_ints", "int_to_two_bytes", "ints_to_bytes", "two_bytes_to_int"]
