from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Header

from xiaoliuren.analytics.stats import tally, uniformity_p_value
from xiaoliuren.api.schemas import LabelsOut, ReadingOut, SimulateOut
from xiaoliuren.config import settings
from xiaoliuren.core.errors import MinorRenError
from xiaoliuren.core.labels import LABELS
from xiaoliuren.core.rng import SeededRandomSource
from xiaoliuren.models import SessionResult
from xiaoliuren.services import simulate as run_simulation
from xiaoliuren.services import start_by_random, start_by_time, start_with

router = APIRouter()


def _auth(api_key_header: str | None = Header(default=None, alias="X-API-Key")):
    if settings.api_key and api_key_header != settings.api_key:
        raise HTTPException(status_code=401, detail="Invalid API key")


def _reading(r: SessionResult) -> dict:
    return {
        'x': r.x, 'y': r.y, 'z': r.z,
        'names': list(r.names),
        'first': r.first, 'second': r.second, 'third': r.third,
    }


@router.get('/labels', response_model=LabelsOut)
def labels():
    return {'labels': list(LABELS)}


@router.get('/calculate', response_model=ReadingOut)
def calculate(x: int, y: int, z: int, ok=Depends(_auth)):
    try:
        return _reading(start_with(x, y, z))
    except MinorRenError as e:
        raise HTTPException(400, detail=str(e))


@router.get('/random', response_model=ReadingOut)
def random_reading(min: int | None = None, max: int | None = None, ok=Depends(_auth)):
    lo = settings.random_min if min is None else min
    hi = settings.random_max if max is None else max
    try:
        return _reading(start_by_random(lo, hi))
    except MinorRenError as e:
        raise HTTPException(400, detail=str(e))


@router.get('/time', response_model=ReadingOut)
def time_reading(ts: datetime | None = None, ok=Depends(_auth)):
    return _reading(start_by_time(ts))


@router.get('/simulate', response_model=SimulateOut)
def simulate(rounds: int | None = None, min: int | None = None, max: int | None = None,
             seed: int | None = None, ok=Depends(_auth)):
    rounds = settings.simulate_rounds if rounds is None else rounds
    lo = settings.random_min if min is None else min
    hi = settings.random_max if max is None else max
    source = SeededRandomSource(seed) if seed is not None else None
    try:
        t = tally(run_simulation(rounds, lo, hi, source))
    except MinorRenError as e:
        raise HTTPException(400, detail=str(e))
    return {
        'rounds': t.rounds, 'min': lo, 'max': hi, 'seed': seed,
        'counts': t.as_dict(),
        'p_values': [uniformity_p_value(row) for row in t.counts],
    }
