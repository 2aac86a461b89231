"""Shared fixtures providing deterministic randomness and clocks."""

from __future__ import annotations

import random

import pytest

from kanjipost.config import CarrierCfg
from kanjipost.crypto import BlowfishHeaderCipher
from kanjipost.framing import HeaderCodec


class SeededRandom:
    """Reproducible stand-in for :class:`kanjipost.crypto.SystemRandomSource`."""

    def __init__(self, seed: int = 0) -> None:
        self._rng = random.Random(seed)

    def next_bytes(self, size: int) -> bytes:
        return bytes(self._rng.getrandbits(8) for _ in range(size))

    def next_int64(self) -> int:
        return self._rng.getrandbits(64)


FIXED_MILLIS = 1_700_000_000_000


@pytest.fixture
def seeded_random() -> SeededRandom:
    return SeededRandom(1234)


@pytest.fixture
def cfg() -> CarrierCfg:
    return CarrierCfg()


@pytest.fixture
def header_codec(cfg: CarrierCfg, seeded_random: SeededRandom) -> HeaderCodec:
    return HeaderCodec(BlowfishHeaderCipher(cfg.header_key), seeded_random, clock=lambda: FIXED_MILLIS)


@pytest.fixture
def engine(cfg: CarrierCfg, seeded_random: SeededRandom):
    return cfg.build_engine(random_source=seeded_random, clock=lambda: FIXED_MILLIS)


@pytest.fixture
def make_engine(cfg: CarrierCfg):
    def _make(seed: int = 0, **kwargs):
        return cfg.build_engine(random_source=SeededRandom(seed), clock=lambda: FIXED_MILLIS, **kwargs)

    return _make
