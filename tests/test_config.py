import pytest

from kanjipost.config import DEFAULT_KEY, HEADER_KEY_ENV, KEY_ENV, CarrierCfg
from kanjipost.exceptions import ConfigurationError
from kanjipost.framing import FragmentationEngine


def test_defaults():
    cfg = CarrierCfg()
    assert cfg.payload_key == DEFAULT_KEY
    assert cfg.header_key == DEFAULT_KEY


def test_from_env_without_keys():
    assert CarrierCfg.from_env({}) == CarrierCfg()


def test_from_env_reads_hex_keys():
    payload_hex = "00" * 32
    cfg = CarrierCfg.from_env({KEY_ENV: payload_hex})
    assert cfg.payload_key == bytes(32)
    assert cfg.header_key == bytes(32)

    cfg = CarrierCfg.from_env({KEY_ENV: payload_hex, HEADER_KEY_ENV: "ab" * 8})
    assert cfg.header_key == b"\xab" * 8


def test_from_dict_accepts_bytes():
    cfg = CarrierCfg.from_dict({"payload_key": b"k" * 24})
    assert cfg.payload_key == b"k" * 24


@pytest.mark.parametrize(
    "data",
    [
        {"payload_key": "not-hex"},
        {"payload_key": "00" * 15},
        {"payload_key": 1234},
        {"header_key": "00" * 3},
        {"header_key": "00" * 57},
    ],
)
def test_invalid_keys(data):
    with pytest.raises(ConfigurationError):
        CarrierCfg.from_dict(data)


def test_from_dict_rejects_non_mapping():
    with pytest.raises(ConfigurationError):
        CarrierCfg.from_dict(["payload_key"])


def test_build_engine_roundtrip():
    cfg = CarrierCfg.from_dict({"payload_key": "11" * 16, "header_key": "22" * 16})
    engine = cfg.build_engine()
    assert isinstance(engine, FragmentationEngine)
    assert engine.decode(engine.encode(2, "configured")) == (2, "configured")
