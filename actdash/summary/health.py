"""Run health symbols."""

from enum import Enum
from typing import List, Sequence

from ..models import Run
from .filters import DEFAULT_MAX_RUNS, run_prefix

NEUTRAL_CONCLUSIONS = {"skipped", "cancelled", "neutral"}


class HealthSymbol(str, Enum):
    """Outcome of a single run as shown on a card."""

    PASS = "pass"
    FAIL = "fail"
    NEUTRAL = "neutral"
    UNKNOWN = "neutral-unknown"


def classify_run(run: Run) -> HealthSymbol:
    """Map a run's status and conclusion to a health symbol."""
    if not run.completed:
        return HealthSymbol.UNKNOWN

    if run.conclusion == "success":
        return HealthSymbol.PASS
    if run.conclusion in NEUTRAL_CONCLUSIONS:
        return HealthSymbol.NEUTRAL
    return HealthSymbol.FAIL


def summarize_health(runs: Sequence[Run], max_runs: int = DEFAULT_MAX_RUNS) -> List[HealthSymbol]:
    """Health symbols for the most recent runs, in input order."""
    return [classify_run(run) for run in run_prefix(runs, max_runs)]
