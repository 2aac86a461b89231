"""Utilities for converting between integers, codepoints and carrier text."""
from __future__ import annotations

from typing import Iterable, List, Sequence

from .cjk import codepoints_to_ints, ints_to_codepoints
from .ints import bytes_to_ints, ints_to_bytes


def codepoints_to_string(codepoints: Iterable[int]) -> str:
    """Concatenate *codepoints* into a string, preserving order."""

    return "".join(chr(codepoint) for codepoint in codepoints)


def string_to_codepoints(text: str) -> List[int]:
    """Return one codepoint per character of *text*.

    Python strings index by codepoint, so astral characters such as those of
    CJK Extension B are consumed whole rather than as surrogate halves.
    """

    return [ord(char) for char in text]


def ints_to_string(values: Sequence[int]) -> str:
    return codepoints_to_string(ints_to_codepoints(values))


def string_to_ints(text: str) -> List[int]:
    return codepoints_to_ints(string_to_codepoints(text))


def bytes_to_string(data: bytes) -> str:
    """Render an even-length byte sequence as CJK text, two bytes per character."""

    return ints_to_string(bytes_to_ints(data))


def string_to_bytes(text: str) -> bytes:
    """Inverse of :func:`bytes_to_string`."""

    return ints_to_bytes(string_to_ints(text))


__all__ = [
    "bytes_to_string",
    "codepoints_to_string",
    "ints_to_string",
    "string_to_bytes",
    "string_to_codepoints",
    "string_to_ints",
]
