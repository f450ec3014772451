"""Average run duration."""

from datetime import timedelta
from typing import Sequence

from ..models import Run
from .filters import DEFAULT_MAX_RUNS, run_prefix

DIVIDE_BY_CAP = "cap"
DIVIDE_BY_EXAMINED = "examined"


def average_elapsed(
    runs: Sequence[Run],
    max_runs: int = DEFAULT_MAX_RUNS,
    divisor: str = DIVIDE_BY_CAP,
) -> timedelta:
    """
    Average elapsed time of the most recent runs, in whole seconds.

    With the default ``cap`` divisor the total is divided by ``max_runs``
    regardless of how many runs were examined, so workflows with fewer runs
    report a lower average. ``examined`` divides by the number of runs
    actually summed instead.

    Args:
        runs: Filtered runs, newest first
        max_runs: Run cap
        divisor: ``cap`` or ``examined``

    Returns:
        Average as a duration truncated to whole seconds
    """
    prefix = run_prefix(runs, max_runs)
    total_seconds = sum(int(run.elapsed.total_seconds()) for run in prefix)

    if divisor == DIVIDE_BY_CAP:
        count = max_runs
    elif divisor == DIVIDE_BY_EXAMINED:
        count = len(prefix)
    else:
        raise ValueError(f"Unknown average divisor: {divisor}")

    if count == 0:
        return timedelta(0)

    # truncate toward zero
    return timedelta(seconds=int(total_seconds / count))
