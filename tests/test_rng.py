import pytest

from xiaoliuren.core.errors import InvalidRange
from xiaoliuren.core.rng import SeededRandomSource, bytes_needed, rand_int


class ScriptedSource:
    def __init__(self, chunks):
        self.chunks = list(chunks)
        self.calls = []

    def token_bytes(self, n):
        self.calls.append(n)
        return self.chunks.pop(0)


def test_bytes_needed():
    assert bytes_needed(1) == 0
    assert bytes_needed(2) == 1
    assert bytes_needed(60) == 1
    assert bytes_needed(256) == 1
    assert bytes_needed(257) == 2
    assert bytes_needed(65536) == 2
    assert bytes_needed(65537) == 3


def test_rejects_biased_tail():
    # span 60: 256 - 256 % 60 = 240, so 240..255 are redrawn
    src = ScriptedSource([bytes([250]), bytes([240]), bytes([61])])
    assert rand_int(1, 60, src) == 1 + 61 % 60
    assert src.calls == [1, 1, 1]


def test_little_endian():
    src = ScriptedSource([bytes([0x01, 0x02])])
    assert rand_int(0, 999, src) == 0x0201 % 1000


def test_single_value_range():
    src = ScriptedSource([b''])
    assert rand_int(7, 7, src) == 7
    assert rand_int(3, 3) == 3


def test_bad_range():
    with pytest.raises(InvalidRange):
        rand_int(10, 1)


def test_bounds_and_coverage():
    seen = {rand_int(1, 6) for _ in range(2000)}
    assert seen == {1, 2, 3, 4, 5, 6}
    assert all(-3 <= rand_int(-3, 3) <= 3 for _ in range(500))


def test_seeded_source_repeats():
    a = [rand_int(1, 60, SeededRandomSource(42)) for _ in range(3)]
    s1, s2 = SeededRandomSource(9), SeededRandomSource(9)
    assert [rand_int(1, 1000, s1) for _ in range(20)] == [rand_int(1, 1000, s2) for _ in range(20)]
    assert len(set(a)) == 1
