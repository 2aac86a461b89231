from kanjipost.crypto.rng import SystemRandomSource


def test_next_bytes_length():
    rng = SystemRandomSource()
    assert len(rng.next_bytes(0)) == 0
    assert len(rng.next_bytes(272)) == 272


def test_outputs_do_not_repeat():
    rng = SystemRandomSource()
    assert rng.next_bytes(16) != rng.next_bytes(16)
    values = {rng.next_int64() for _ in range(32)}
    assert len(values) == 32
    assert all(0 <= value < 1 << 64 for value in values)
