"""High level encode/decode entry points.

Each call builds a fresh engine from the supplied (or environment)
configuration; long-lived callers should keep their own
:class:`~kanjipost.framing.FragmentationEngine` from
:meth:`CarrierCfg.build_engine`.
"""
from __future__ import annotations

from typing import Any, List, Optional, Sequence

from .config import CarrierCfg
from .protocols import DecodedPayload, TEXT_UTF8


def _resolve(cfg: Optional[CarrierCfg]) -> CarrierCfg:
    return cfg if cfg is not None else CarrierCfg.from_env()


def encode(protocol_id: int, payload: Any, *, cfg: Optional[CarrierCfg] = None) -> List[str]:
    """Encrypt *payload* into a list of 140-character CJK units.

    Examples
    --------
    >>> units = encode(2, "hello")
    >>> len(units), len(units[0])
    (1, 140)
    """

    return _resolve(cfg).build_engine().encode(protocol_id, payload)


def decode(units: Sequence[str], *, cfg: Optional[CarrierCfg] = None) -> DecodedPayload:
    """Reassemble and decrypt *units* produced by :func:`encode`."""

    return _resolve(cfg).build_engine().decode(units)


def encode_text(text: str, *, cfg: Optional[CarrierCfg] = None) -> List[str]:
    return encode(TEXT_UTF8, text, cfg=cfg)


def random_unit(*, cfg: Optional[CarrierCfg] = None) -> str:
    """Return a decoy unit indistinguishable in alphabet from real ones."""

    return _resolve(cfg).build_packer().random_unit()


__all__ = ["decode", "encode", "encode_text", "random_unit"]
