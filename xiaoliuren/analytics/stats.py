import math
from dataclasses import dataclass
from typing import Iterable

from xiaoliuren.core.labels import LABELS, PALACES, label_at
from xiaoliuren.models import SessionResult


@dataclass
class LabelTally:
    rounds: int
    counts: list[list[int]]  # [position][palace index]

    def as_dict(self) -> list[dict[str, int]]:
        return [{label_at(i): row[i] for i in range(PALACES)} for row in self.counts]


def tally(results: Iterable[SessionResult]) -> LabelTally:
    counts = [[0] * PALACES for _ in range(3)]
    n = 0
    for r in results:
        n += 1
        for pos, name in enumerate(r.names):
            counts[pos][LABELS.index(name)] += 1
    return LabelTally(rounds=n, counts=counts)


def chi_square(counts: list[int]) -> float:
    total = sum(counts)
    if total == 0:
        return 0.0
    expected = total / len(counts)
    return sum((c - expected) ** 2 / expected for c in counts)


def chi2_sf(x: float, dof: int) -> float:
    # survival function of the chi-square distribution, odd dof only
    # (closed form via erfc plus the finite series), which covers dof=5
    if dof % 2 != 1 or dof < 1:
        raise ValueError("dof must be a positive odd integer")
    if x <= 0:
        return 1.0
    s = math.erfc(math.sqrt(x / 2))
    term = math.sqrt(2 * x / math.pi) * math.exp(-x / 2)
    for k in range(1, (dof - 1) // 2 + 1):
        s += term
        term *= x / (2 * k + 1)
    return min(max(s, 0.0), 1.0)


def uniformity_p_value(counts: list[int]) -> float:
    return chi2_sf(chi_square(counts), len(counts) - 1)
