"""Encrypted payload carrier over fixed-length CJK ideograph text."""

from .api import decode, encode, encode_text, random_unit
from .config import CarrierCfg
from .exceptions import (
    ConfigurationError,
    InvalidInputError,
    KanjiPostError,
    OutOfRangeError,
    ProtocolViolationError,
    UnsupportedProtocolError,
)
from .protocols import DecodedPayload, PayloadProtocol, ProtocolRegistry, default_registry

__all__ = [
    "CarrierCfg",
    "ConfigurationError",
    "DecodedPayload",
    "InvalidInputError",
    "KanjiPostError",
    "OutOfRangeError",
    "PayloadProtocol",
    "ProtocolRegistry",
    "ProtocolViolationError",
    "UnsupportedProtocolError",
    "decode",
    "default_registry",
    "encode",
    "encode_text",
    "random_unit",
]
