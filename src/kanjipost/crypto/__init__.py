"""Convenience exports for the cryptography adapters."""

from __future__ import annotations

from .cipher import (
    AES_BLOCK_SIZE,
    HEADER_BLOCK_SIZE,
    AesCbcCipher,
    BlowfishHeaderCipher,
    HeaderCipher,
    PayloadCipher,
    padded_length,
)
from .rng import RandomSource, SystemRandomSource

__all__ = [
    "AES_BLOCK_SIZE",
    "HEADER_BLOCK_SIZE",
    "AesCbcCipher",
    "BlowfishHeaderCipher",
    "HeaderCipher",
    "PayloadCipher",
    "RandomSource",
    "SystemRandomSource",
    "padded_length",
]
