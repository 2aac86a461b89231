"""Utility helpers for kanjipost."""

from .logging import configure_logging

__all__ = ["configure_logging"]
