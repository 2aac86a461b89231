"""Fixed-length message units rendered as CJK text."""

from __future__ import annotations

from typing import Final, Tuple

from ..codec.textio import bytes_to_string, string_to_bytes
from ..crypto.rng import RandomSource
from ..exceptions import InvalidInputError, ProtocolViolationError
from .header import HEADER_SIZE

SLOT_SIZE: Final[int] = 272
UNIT_SIZE: Final[int] = HEADER_SIZE + SLOT_SIZE
UNIT_CODEPOINTS: Final[int] = UNIT_SIZE // 2


class MessageUnitPacker:
    """Assemble ``header || chunk || padding`` into exactly one unit string."""

    def __init__(self, random_source: RandomSource) -> None:
        self._random = random_source

    def pack(self, header: bytes, chunk: bytes) -> str:
        if len(header) != HEADER_SIZE:
            raise InvalidInputError(f"header must be {HEADER_SIZE} bytes long, got {len(header)}")
        if len(chunk) > SLOT_SIZE:
            raise InvalidInputError(f"chunk of {len(chunk)} bytes exceeds the {SLOT_SIZE} byte slot")
        padding = self._random.next_bytes(SLOT_SIZE - len(chunk))
        data = bytes(header) + bytes(chunk) + padding
        assert len(data) == UNIT_SIZE
        return bytes_to_string(data)

    def unpack(self, unit: str) -> Tuple[bytes, bytes]:
        """Return ``(header, slot)``; the slot still carries its random padding."""

        if len(unit) != UNIT_CODEPOINTS:
            raise ProtocolViolationError(
                f"unit must contain {UNIT_CODEPOINTS} characters, got {len(unit)}"
            )
        data = string_to_bytes(unit)
        return data[:HEADER_SIZE], data[HEADER_SIZE:]

    def random_unit(self) -> str:
        """Return a decoy unit built from random bytes only."""

        return bytes_to_string(self._random.next_bytes(UNIT_SIZE))


__all__ = ["SLOT_SIZE", "UNIT_CODEPOINTS", "UNIT_SIZE", "MessageUnitPacker"]
