"""Byte, integer and codepoint codecs for CJK carrier text."""

from .cjk import DOMAIN_SIZE, codepoint_to_int, int_to_codepoint
from .ints import bytes_to_ints, ints_to_bytes
from .textio import (
    bytes_to_string,
    codepoints_to_string,
    ints_to_string,
    string_to_bytes,
    string_to_codepoints,
    string_to_ints,
)

__all__ = [
    "DOMAIN_SIZE",
    "bytes_to_ints",
    "bytes_to_string",
    "codepoint_to_int",
    "codepoints_to_string",
    "int_to_codepoint",
    "ints_to_bytes",
    "ints_to_string",
    "string_to_bytes",
    "string_to_codepoints",
    "string_to_ints",
]
