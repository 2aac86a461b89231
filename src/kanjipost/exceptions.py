"""Custom exception hierarchy for the kanjipost carrier."""
from __future__ import annotations


class KanjiPostError(Exception):
    """Base class for all kanjipost errors."""


class ConfigurationError(KanjiPostError):
    """Raised when user-supplied configuration is invalid."""


class InvalidInputError(KanjiPostError, ValueError):
    """Raised when a local argument is outside the domain of an operation."""


class OutOfRangeError(InvalidInputError):
    """Raised when an integer or codepoint falls outside the CJK alphabet."""


class UnsupportedProtocolError(KanjiPostError):
    """Raised when no payload protocol is registered for an id."""

    def __init__(self, protocol_id: int) -> None:
        super().__init__(f"Invalid protocolId: {protocol_id}")
        self.protocol_id = protocol_id


class ProtocolViolationError(KanjiPostError):
    """Raised when a received unit sequence cannot be reassembled."""


__all__ = [
    "ConfigurationError",
    "InvalidInputError",
    "KanjiPostError",
    "OutOfRangeError",
    "ProtocolViolationError",
    "UnsupportedProtocolError",
]
