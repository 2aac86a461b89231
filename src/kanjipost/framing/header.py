"""Obfuscated 8-byte unit header.

The header is a 64-bit big-endian integer with the following fields
(bit 0 is the least significant):

===========  ========  ==============================================
bits         field     meaning
===========  ========  ==============================================
``0..51``    filler    clock-derived or random, never interpreted
``52..57``   protocol  payload protocol id, ``0..63``
``58..62``   blocks    AES block count of the ciphertext slot
``63``       partial   set when more units follow (dummy header)
===========  ========  ==============================================

The packed value is passed through a header cipher before being placed in a
unit, and the resulting 8 bytes double as the payload IV.
"""

from __future__ import annotations

import struct
import time
from dataclasses import dataclass
from typing import Callable, Final, Optional

from ..crypto.cipher import AES_BLOCK_SIZE, HEADER_BLOCK_SIZE, HeaderCipher
from ..crypto.rng import RandomSource
from ..exceptions import InvalidInputError

HEADER_SIZE: Final[int] = HEADER_BLOCK_SIZE

FILLER_BITS: Final[int] = 52
FILLER_MASK: Final[int] = (1 << FILLER_BITS) - 1
PROTOCOL_SHIFT: Final[int] = 52
PROTOCOL_MASK: Final[int] = 0x3F
BLOCKS_SHIFT: Final[int] = 58
BLOCKS_MASK: Final[int] = 0x1F
PARTIAL_SHIFT: Final[int] = 63

MAX_PROTOCOL_ID: Final[int] = PROTOCOL_MASK
MAX_BLOCK_COUNT: Final[int] = BLOCKS_MASK

# Low filler bits drawn from the random source, so headers built within the
# same millisecond still differ.
_JITTER_BITS: Final[int] = 11


def _now_millis() -> int:
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class Header:
    """Decoded header fields."""

    block_count: int
    protocol_id: int
    is_partial: bool

    @property
    def ciphertext_length(self) -> int:
        """Number of ciphertext bytes in the unit's slot."""
        return self.block_count * AES_BLOCK_SIZE


def block_count_for(payload_length: int) -> int:
    """Return the AES block count for a chunk of *payload_length* plaintext bytes."""

    if payload_length < 0:
        raise InvalidInputError("payload length must be non-negative")
    return payload_length // AES_BLOCK_SIZE + 1


def pack_header_value(filler: int, block_count: int, protocol_id: int, is_partial: bool) -> int:
    """Pack header fields into a 64-bit integer."""

    if not 0 <= protocol_id <= MAX_PROTOCOL_ID:
        raise InvalidInputError(f"protocolId must be in [0, {MAX_PROTOCOL_ID + 1}), got {protocol_id}")
    if not 0 <= block_count <= MAX_BLOCK_COUNT:
        raise InvalidInputError(f"block count must be in [0, {MAX_BLOCK_COUNT + 1}), got {block_count}")
    value = filler & FILLER_MASK
    value |= protocol_id << PROTOCOL_SHIFT
    value |= block_count << BLOCKS_SHIFT
    if is_partial:
        value |= 1 << PARTIAL_SHIFT
    return value


def unpack_header_value(value: int) -> Header:
    """Extract the header fields from a 64-bit integer, ignoring the filler."""

    return Header(
        block_count=(value >> BLOCKS_SHIFT) & BLOCKS_MASK,
        protocol_id=(value >> PROTOCOL_SHIFT) & PROTOCOL_MASK,
        is_partial=bool((value >> PARTIAL_SHIFT) & 1),
    )


class HeaderCodec:
    """Build and parse obfuscated unit headers."""

    def __init__(
        self,
        cipher: HeaderCipher,
        random_source: RandomSource,
        *,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self._cipher = cipher
        self._random = random_source
        self._clock = clock or _now_millis

    def _seal(self, value: int) -> bytes:
        return self._cipher.encrypt_block(struct.pack(">Q", value))

    def encode_header(self, payload_length: int, protocol_id: int, fragment: bool = False) -> bytes:
        """Return the obfuscated header for a chunk of *payload_length* plaintext bytes.

        The filler combines the current time in milliseconds with a few random
        bits. It carries no meaning for the receiver.
        """

        jitter = self._random.next_int64() & ((1 << _JITTER_BITS) - 1)
        filler = (self._clock() << _JITTER_BITS) | jitter
        value = pack_header_value(filler, block_count_for(payload_length), protocol_id, fragment)
        return self._seal(value)

    def encode_dummy_header(self) -> bytes:
        """Return a random header whose only meaningful field is the partial flag."""

        value = (self._random.next_int64() & 0xFFFFFFFFFFFFFFFF) | (1 << PARTIAL_SHIFT)
        return self._seal(value)

    def decode_header(self, data: bytes) -> Header:
        if len(data) != HEADER_SIZE:
            raise InvalidInputError(f"header must be {HEADER_SIZE} bytes long, got {len(data)}")
        (value,) = struct.unpack(">Q", self._cipher.decrypt_block(bytes(data)))
        return unpack_header_value(value)


def iv_for_header(header: bytes) -> bytes:
    """Derive the 16-byte payload IV from an obfuscated header."""

    return bytes(header) * 2


__all__ = [
    "HEADER_SIZE",
    "MAX_BLOCK_COUNT",
    "MAX_PROTOCOL_ID",
    "Header",
    "HeaderCodec",
    "block_count_for",
    "iv_for_header",
    "pack_header_value",
    "unpack_header_value",
]
