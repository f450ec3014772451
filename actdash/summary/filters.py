"""Run window selection."""

from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Sequence

import pendulum

from ..models import Run

DEFAULT_MAX_RUNS = 5


def filter_runs(
    runs: Iterable[Run],
    window: timedelta,
    now: Optional[datetime] = None,
) -> List[Run]:
    """
    Keep completed runs that finished within the lookback window.

    Input order is preserved. Runs that are not completed are dropped.

    Args:
        runs: Runs in the order returned by the API
        window: Lookback duration
        now: Reference time, defaults to the current UTC time

    Returns:
        Runs with ``now - finished_at < window``
    """
    if now is None:
        now = pendulum.now("UTC")

    return [
        run
        for run in runs
        if run.completed and run.finished_at is not None and now - run.finished_at < window
    ]


def sort_newest_first(runs: Iterable[Run]) -> List[Run]:
    """Order runs by completion time, newest first; unfinished runs go last."""
    runs = list(runs)
    finished = [r for r in runs if r.finished_at is not None]
    unfinished = [r for r in runs if r.finished_at is None]
    return sorted(finished, key=lambda r: r.finished_at, reverse=True) + unfinished


def run_prefix(runs: Sequence[Run], max_runs: int = DEFAULT_MAX_RUNS) -> Sequence[Run]:
    """
    Runs examined for health and average elapsed time.

    The cap is inclusive, so up to ``max_runs + 1`` runs are returned. Runs
    are assumed to be newest-first already.
    """
    return runs[: max_runs + 1]
