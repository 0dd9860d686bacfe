"""
True-random integers for drawing the three counts.

`rand_int` does rejection sampling over whole bytes so every value in
[lo, hi] is equally likely (plain `value % range` would favour the low end
whenever range does not divide 256**n).

The byte source is injectable: `SystemRandomSource` (default) reads from the
OS CSPRNG via `secrets`; `SeededRandomSource` is reproducible and meant for
tests and simulations only.
"""
from __future__ import annotations

import logging
import random
import secrets
from typing import Optional, Protocol

from xiaoliuren.core.errors import InvalidRange
from xiaoliuren.core.validation import is_valid_range

log = logging.getLogger(__name__)


class RandomSource(Protocol):
    def token_bytes(self, n: int) -> bytes: ...


class SystemRandomSource:
    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


class SeededRandomSource:
    """Deterministic bytes from `random.Random(seed)`. Not for real readings."""

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)

    def token_bytes(self, n: int) -> bytes:
        return self._rng.randbytes(n)


DEFAULT_SOURCE: RandomSource = SystemRandomSource()


def bytes_needed(span: int) -> int:
    # ceil(log2(span) / 8) without floats
    return ((span - 1).bit_length() + 7) // 8


def rand_int(lo: int, hi: int, source: Optional[RandomSource] = None) -> int:
    """Uniform integer in [lo, hi], both ends inclusive."""
    if not is_valid_range(lo, hi):
        raise InvalidRange(f"min ({lo}) must not exceed max ({hi})")
    src = source or DEFAULT_SOURCE
    span = hi - lo + 1
    n = bytes_needed(span)
    max_value = 256 ** n
    limit = max_value - (max_value % span)
    while True:
        value = int.from_bytes(src.token_bytes(n), 'little')
        if value < limit:
            return lo + (value % span)
        log.debug("rejected draw %d (limit %d, span %d)", value, limit, span)
