import pytest

from xiaoliuren.core.calculator import calculate_indices, calculate_minor_ren
from xiaoliuren.core.errors import InvalidInput
from xiaoliuren.core.labels import LABELS, label_at


def test_label_table():
    assert LABELS == ('大安', '留连', '速喜', '赤口', '小吉', '空亡')
    assert len(set(LABELS)) == 6
    assert label_at(7) == '留连'


def test_known_readings():
    assert calculate_minor_ren(1, 1, 1) == ('大安', '大安', '大安')
    assert calculate_minor_ren(3, 4, 5) == (LABELS[2], LABELS[5], LABELS[3])
    assert calculate_indices(2, 6, 31) == (1, 0, 0)


def test_deterministic_and_in_table():
    for x in range(1, 14):
        for y in range(1, 14):
            for z in (1, 5, 12, 60):
                out = calculate_minor_ren(x, y, z)
                assert out == calculate_minor_ren(x, y, z)
                assert all(n in LABELS for n in out)


def test_period_six():
    for x, y, z in [(1, 1, 1), (3, 4, 5), (12, 60, 60), (7, 2, 9)]:
        a = calculate_minor_ren(x, y, z)
        assert calculate_minor_ren(x + 6, y, z)[0] == a[0]
        assert calculate_minor_ren(x, y + 6, z)[1] == a[1]
        assert calculate_minor_ren(x, y, z + 6)[2] == a[2]
        assert calculate_minor_ren(x + 6, y + 6, z + 6) == a


@pytest.mark.parametrize("args", [(0, 1, 1), (1, 0, 1), (1, 1, 0), (-5, 3, 3), (0, 0, 0)])
def test_below_one_rejected(args):
    with pytest.raises(InvalidInput):
        calculate_minor_ren(*args)


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        calculate_minor_ren(1, 1, -1)
