"""Secure random sources consumed by the header codec and unit packer."""

from __future__ import annotations

import secrets
from typing import Protocol

__all__ = ["RandomSource", "SystemRandomSource"]


class RandomSource(Protocol):
    """Capability providing unpredictable bytes and 64-bit integers."""

    def next_bytes(self, size: int) -> bytes:
        ...

    def next_int64(self) -> int:
        ...


class SystemRandomSource:
    """Operating-system CSPRNG; stateless and safe to share between threads."""

    def next_bytes(self, size: int) -> bytes:
        if size < 0:
            raise ValueError("size must be non-negative")
        return secrets.token_bytes(size)

    def next_int64(self) -> int:
        return secrets.randbits(64)
