import json
import logging
from datetime import datetime
from typing import Optional

import typer

from xiaoliuren.analytics.stats import tally, uniformity_p_value
from xiaoliuren.config import settings
from xiaoliuren.core.errors import MinorRenError
from xiaoliuren.core.labels import LABELS
from xiaoliuren.core.rng import SeededRandomSource
from xiaoliuren.models import SessionResult
from xiaoliuren.services import simulate as run_simulation
from xiaoliuren.services import start_by_random, start_by_time, start_with

app = typer.Typer(help="小六壬 readings from numbers, true randomness, or the clock.")


@app.callback()
def main(log_level: str = typer.Option(settings.log_level, "--log-level")):
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


def _echo(data) -> None:
    typer.echo(json.dumps(data, ensure_ascii=False))


def _echo_reading(r: SessionResult) -> None:
    _echo({'x': r.x, 'y': r.y, 'z': r.z, 'names': list(r.names)})


def _fail(e: MinorRenError):
    typer.echo(f"error: {e}", err=True)
    raise typer.Exit(code=2)


@app.command()
def labels():
    _echo(list(LABELS))


@app.command()
def calc(x: int, y: int, z: int):
    try:
        _echo_reading(start_with(x, y, z))
    except MinorRenError as e:
        _fail(e)


@app.command("random")
def random_(min: int = typer.Option(settings.random_min, "--min"),
            max: int = typer.Option(settings.random_max, "--max"),
            seed: Optional[int] = typer.Option(None, help="reproducible (non-cryptographic) draw")):
    source = SeededRandomSource(seed) if seed is not None else None
    try:
        _echo_reading(start_by_random(min, max, source))
    except MinorRenError as e:
        _fail(e)


@app.command("time")
def time_(at: Optional[str] = typer.Option(None, help="ISO-8601 timestamp, default now")):
    moment = None
    if at:
        try:
            moment = datetime.fromisoformat(at)
        except ValueError:
            raise typer.BadParameter(f"not an ISO-8601 timestamp: {at}", param_hint="--at")
    _echo_reading(start_by_time(moment))


@app.command()
def simulate(rounds: int = typer.Option(settings.simulate_rounds),
             min: int = typer.Option(settings.random_min, "--min"),
             max: int = typer.Option(settings.random_max, "--max"),
             seed: Optional[int] = typer.Option(None)):
    source = SeededRandomSource(seed) if seed is not None else None
    try:
        t = tally(run_simulation(rounds, min, max, source))
    except MinorRenError as e:
        _fail(e)
    _echo({
        'rounds': t.rounds,
        'counts': t.as_dict(),
        'p_values': [round(uniformity_p_value(row), 4) for row in t.counts],
    })


if __name__ == "__main__":
    app()
