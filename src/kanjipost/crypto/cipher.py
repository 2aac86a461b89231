"""Symmetric cipher adapters built on :mod:`cryptography`.

Two ciphers are involved in a message unit:

* the payload is encrypted with AES-CBC and PKCS7 padding, and
* the 8-byte header is obfuscated with a single unchained Blowfish block.
"""

from __future__ import annotations

from typing import Final, Protocol

from cryptography.hazmat.decrepit.ciphers.algorithms import Blowfish  # type: ignore[import-not-found]
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

__all__ = [
    "AES_BLOCK_SIZE",
    "HEADER_BLOCK_SIZE",
    "AesCbcCipher",
    "BlowfishHeaderCipher",
    "HeaderCipher",
    "PayloadCipher",
    "padded_length",
]

AES_BLOCK_SIZE: Final[int] = 16
HEADER_BLOCK_SIZE: Final[int] = 8


class PayloadCipher(Protocol):
    """Block-chaining cipher whose padding always adds at least one byte."""

    def encrypt(self, iv: bytes, plaintext: bytes) -> bytes:
        ...

    def decrypt(self, iv: bytes, ciphertext: bytes) -> bytes:
        ...


class HeaderCipher(Protocol):
    """Unchained 8-byte block cipher used to hide header bit fields."""

    def encrypt_block(self, block: bytes) -> bytes:
        ...

    def decrypt_block(self, block: bytes) -> bytes:
        ...


def padded_length(length: int) -> int:
    """Return the PKCS7-padded size of a plaintext of *length* bytes."""

    return (length // AES_BLOCK_SIZE + 1) * AES_BLOCK_SIZE


class AesCbcCipher:
    """AES in CBC mode with PKCS7 padding."""

    def __init__(self, key: bytes) -> None:
        self._algorithm = algorithms.AES(key)

    def encrypt(self, iv: bytes, plaintext: bytes) -> bytes:
        padder = padding.PKCS7(AES_BLOCK_SIZE * 8).padder()
        padded = padder.update(plaintext) + padder.finalize()
        encryptor = Cipher(self._algorithm, modes.CBC(iv)).encryptor()
        return encryptor.update(padded) + encryptor.finalize()

    def decrypt(self, iv: bytes, ciphertext: bytes) -> bytes:
        """Decrypt *ciphertext*; bad padding raises :class:`ValueError` from ``cryptography``."""

        decryptor = Cipher(self._algorithm, modes.CBC(iv)).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(AES_BLOCK_SIZE * 8).unpadder()
        return unpadder.update(padded) + unpadder.finalize()


class BlowfishHeaderCipher:
    """Blowfish in ECB mode over exactly one block, without padding."""

    def __init__(self, key: bytes) -> None:
        self._algorithm = Blowfish(key)

    def _check(self, block: bytes) -> None:
        if len(block) != HEADER_BLOCK_SIZE:
            raise ValueError(f"header block must be {HEADER_BLOCK_SIZE} bytes long.")

    def encrypt_block(self, block: bytes) -> bytes:
        self._check(block)
        encryptor = Cipher(self._algorithm, modes.ECB()).encryptor()
        return encryptor.update(block) + encryptor.finalize()

    def decrypt_block(self, block: bytes) -> bytes:
        self._check(block)
        decryptor = Cipher(self._algorithm, modes.ECB()).decryptor()
        return decryptor.update(block) + decryptor.finalize()
