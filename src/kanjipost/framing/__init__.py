"""Framing of encrypted payloads into fixed-length CJK message units."""

from .chunker import FragmentationEngine
from .header import (
    HEADER_SIZE,
    Header,
    HeaderCodec,
    block_count_for,
    iv_for_header,
    pack_header_value,
    unpack_header_value,
)
from .unit import SLOT_SIZE, UNIT_CODEPOINTS, UNIT_SIZE, MessageUnitPacker

__all__ = [
    "HEADER_SIZE",
    "SLOT_SIZE",
    "UNIT_CODEPOINTS",
    "UNIT_SIZE",
    "FragmentationEngine",
    "Header",
    "HeaderCodec",
    "MessageUnitPacker",
    "block_count_for",
    "iv_for_header",
    "pack_header_value",
    "unpack_header_value",
]
