from __future__ import annotations

from xiaoliuren.core.errors import InvalidInput
from xiaoliuren.core.labels import LABELS, PALACES
from xiaoliuren.core.validation import is_valid_count


def calculate_indices(x: int, y: int, z: int) -> tuple[int, int, int]:
    """Palace indices for the three counts.

    Counting starts on 大安 for x, then continues from where x landed for y,
    and from where y landed for z; each step counts its starting palace as 1.
    """
    for name, n in (('x', x), ('y', y), ('z', z)):
        if not is_valid_count(n):
            raise InvalidInput(f"{name} must be an integer >= 1, got {n!r}")
    i1 = (x - 1) % PALACES
    i2 = (x + y - 2) % PALACES
    i3 = (x + y + z - 3) % PALACES
    return i1, i2, i3


def calculate_minor_ren(x: int, y: int, z: int) -> tuple[str, str, str]:
    i1, i2, i3 = calculate_indices(x, y, z)
    return LABELS[i1], LABELS[i2], LABELS[i3]
