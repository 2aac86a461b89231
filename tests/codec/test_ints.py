import itertools

import pytest

from kanjipost.codec.ints import bytes_to_ints, int_to_two_bytes, ints_to_bytes, two_bytes_to_int
from kanjipost.exceptions import InvalidInputError


@pytest.mark.parametrize(
    "pair, expected",
    [
        (b"\x00\x00", 0),
        (b"\x01\x00", 1),
        (b"\x00\x01", 256),
        (b"\xff\xff", 65535),
    ],
)
def test_two_bytes_to_int_is_little_endian(pair, expected):
    assert two_bytes_to_int(pair) == expected


def test_two_bytes_to_int_never_negative():
    results = [two_bytes_to_int(bytes(pair)) for pair in itertools.product(range(256), repeat=2)]
    assert min(results) == 0
    assert max(results) == 0xFFFF


def test_int_to_two_bytes_low_byte_first():
    assert int_to_two_bytes(0) == b"\x00\x00"
    assert int_to_two_bytes(1) == b"\x01\x00"
    assert int_to_two_bytes(256) == b"\x00\x01"


def test_int_to_two_bytes_masks_to_sixteen_bits():
    assert int_to_two_bytes(0x1ABCD) == b"\xcd\xab"


def test_ints_and_bytes_undo_each_other():
    values = [0x0, 0x1, 0xFF, 0xFF00, 0x00FF, 0xFFFF]
    assert bytes_to_ints(ints_to_bytes(values)) == values

    data = bytes([0x00, 0x01, 0x0F, 0xFF])
    assert ints_to_bytes(bytes_to_ints(data)) == data


def test_bytes_to_ints_rejects_odd_length():
    with pytest.raises(InvalidInputError):
        bytes_to_ints(b"\x01\x02\x03")


def test_bytes_to_ints_empty():
    assert bytes_to_ints(b"") == []
