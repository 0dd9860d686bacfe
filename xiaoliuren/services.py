from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from xiaoliuren.config import settings
from xiaoliuren.core.calculator import calculate_minor_ren
from xiaoliuren.core.errors import InvalidInput
from xiaoliuren.core.rng import RandomSource, rand_int
from xiaoliuren.core.validation import is_valid_count
from xiaoliuren.models import SessionResult

log = logging.getLogger(__name__)


def start_with(x: int, y: int, z: int) -> SessionResult:
    names = calculate_minor_ren(x, y, z)
    log.debug("reading x=%d y=%d z=%d -> %s", x, y, z, "/".join(names))
    return SessionResult(x=x, y=y, z=z, names=names)


def start_by_random(min_value: int = 1, max_value: int = 60,
                    source: Optional[RandomSource] = None) -> SessionResult:
    """随机起课: three independent true-random counts in [min_value, max_value]."""
    if not is_valid_count(min_value):
        raise InvalidInput(f"min must be an integer >= 1, got {min_value!r}")
    x = rand_int(min_value, max_value, source)
    y = rand_int(min_value, max_value, source)
    z = rand_int(min_value, max_value, source)
    return start_with(x, y, z)


def start_by_time(moment: Optional[datetime] = None) -> SessionResult:
    """时间起课: x is the hour on a 12-hour dial (1..12), y minute+1, z second+1.

    Pass `moment` to get a reproducible reading; otherwise local time is used.
    """
    d = moment or datetime.now()
    x = d.hour % 12 + 1
    y = d.minute + 1
    z = d.second + 1
    return start_with(x, y, z)


def simulate(rounds: int | None = None, min_value: int | None = None,
             max_value: int | None = None,
             source: Optional[RandomSource] = None) -> list[SessionResult]:
    rounds = settings.simulate_rounds if rounds is None else rounds
    lo = settings.random_min if min_value is None else min_value
    hi = settings.random_max if max_value is None else max_value
    if not is_valid_count(rounds):
        raise InvalidInput(f"rounds must be an integer >= 1, got {rounds!r}")
    log.info("simulating %d random readings over [%d, %d]", rounds, lo, hi)
    return [start_by_random(lo, hi, source) for _ in range(rounds)]
