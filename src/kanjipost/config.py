"""Key configuration and engine wiring."""
from __future__ import annotations

import binascii
import os
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from .crypto.cipher import AesCbcCipher, BlowfishHeaderCipher
from .crypto.rng import RandomSource, SystemRandomSource
from .exceptions import ConfigurationError
from .framing.chunker import FragmentationEngine
from .framing.header import HeaderCodec
from .framing.unit import MessageUnitPacker
from .protocols import ProtocolRegistry

KEY_ENV = "KANJIPOST_KEY"
HEADER_KEY_ENV = "KANJIPOST_HEADER_KEY"

# Shared well-known key so that peers interoperate without setup.
DEFAULT_KEY = bytes.fromhex("e233fb87e25dfd0e75a2752f4e6cead2")

_AES_KEY_SIZES = {16, 24, 32}
_BLOWFISH_KEY_RANGE = range(4, 57)


def _parse_key(value: Any, *, field: str) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        try:
            return binascii.unhexlify(value.strip())
        except (binascii.Error, ValueError) as exc:
            raise ConfigurationError(f"'{field}' is not valid hex") from exc
    raise ConfigurationError(f"'{field}' must be bytes or a hex string")


@dataclass(frozen=True)
class CarrierCfg:
    """Keys for the payload and header ciphers."""

    payload_key: bytes = DEFAULT_KEY
    header_key: bytes = DEFAULT_KEY

    def __post_init__(self) -> None:
        if len(self.payload_key) not in _AES_KEY_SIZES:
            raise ConfigurationError("payload key must be 16, 24 or 32 bytes long")
        if len(self.header_key) not in _BLOWFISH_KEY_RANGE:
            raise ConfigurationError("header key must be between 4 and 56 bytes long")

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "CarrierCfg":
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigurationError("carrier configuration must be a mapping")
        payload_key = _parse_key(data.get("payload_key", DEFAULT_KEY), field="payload_key")
        header_key = _parse_key(data.get("header_key", payload_key), field="header_key")
        return cls(payload_key=payload_key, header_key=header_key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CarrierCfg":
        """Read keys from ``KANJIPOST_KEY`` and ``KANJIPOST_HEADER_KEY``."""

        env = os.environ if environ is None else environ
        data = {}
        if env.get(KEY_ENV):
            data["payload_key"] = env[KEY_ENV]
        if env.get(HEADER_KEY_ENV):
            data["header_key"] = env[HEADER_KEY_ENV]
        return cls.from_dict(data)

    def build_engine(
        self,
        *,
        random_source: Optional[RandomSource] = None,
        registry: Optional[ProtocolRegistry] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> FragmentationEngine:
        rng = random_source or SystemRandomSource()
        headers = HeaderCodec(BlowfishHeaderCipher(self.header_key), rng, clock=clock)
        return FragmentationEngine(
            AesCbcCipher(self.payload_key),
            headers,
            MessageUnitPacker(rng),
            registry=registry,
        )

    def build_packer(self, *, random_source: Optional[RandomSource] = None) -> MessageUnitPacker:
        return MessageUnitPacker(random_source or SystemRandomSource())


__all__ = ["DEFAULT_KEY", "HEADER_KEY_ENV", "KEY_ENV", "CarrierCfg"]
