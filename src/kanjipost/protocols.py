"""Registry of payload protocols keyed by the header's protocol id."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, NamedTuple

from .exceptions import ConfigurationError, InvalidInputError, UnsupportedProtocolError

PROTOCOL_ID_LIMIT = 64
TEXT_UTF8 = 2


@dataclass(frozen=True)
class PayloadProtocol:
    """Render/interpret pair turning a payload value into bytes and back."""

    protocol_id: int
    name: str
    render: Callable[[Any], bytes]
    interpret: Callable[[bytes], Any]


class DecodedPayload(NamedTuple):
    protocol_id: int
    value: Any


def _render_text(value: Any) -> bytes:
    if not isinstance(value, str):
        raise InvalidInputError("text payloads must be str")
    return value.encode("utf-8")


def _interpret_text(data: bytes) -> str:
    return data.decode("utf-8")


UTF8_TEXT = PayloadProtocol(TEXT_UTF8, "utf-8 text", _render_text, _interpret_text)


class ProtocolRegistry:
    """Mutable mapping from protocol id to :class:`PayloadProtocol`."""

    def __init__(self) -> None:
        self._protocols: Dict[int, PayloadProtocol] = {}

    def register(self, protocol: PayloadProtocol) -> None:
        if not 0 <= protocol.protocol_id < PROTOCOL_ID_LIMIT:
            raise InvalidInputError(
                f"protocol id must be in [0, {PROTOCOL_ID_LIMIT}), got {protocol.protocol_id}"
            )
        if protocol.protocol_id in self._protocols:
            raise ConfigurationError(f"protocol id {protocol.protocol_id} is already registered")
        self._protocols[protocol.protocol_id] = protocol

    def get(self, protocol_id: int) -> PayloadProtocol:
        try:
            return self._protocols[protocol_id]
        except KeyError:
            raise UnsupportedProtocolError(protocol_id) from None

    def ids(self) -> List[int]:
        return sorted(self._protocols)

    def __contains__(self, protocol_id: object) -> bool:
        return protocol_id in self._protocols

    def render(self, protocol_id: int, value: Any) -> bytes:
        return self.get(protocol_id).render(value)

    def interpret(self, protocol_id: int, data: bytes) -> DecodedPayload:
        return DecodedPayload(protocol_id, self.get(protocol_id).interpret(data))


def default_registry() -> ProtocolRegistry:
    """Return a fresh registry with the built-in protocols enabled."""

    registry = ProtocolRegistry()
    registry.register(UTF8_TEXT)
    return registry


__all__ = [
    "PROTOCOL_ID_LIMIT",
    "TEXT_UTF8",
    "UTF8_TEXT",
    "DecodedPayload",
    "PayloadProtocol",
    "ProtocolRegistry",
    "default_registry",
]
