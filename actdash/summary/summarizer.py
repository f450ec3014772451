"""Build workflow summaries from raw run records."""

from datetime import datetime, timedelta
from typing import Iterable, Optional

from ..models import Run, Workflow
from .billing import BillableFetch, aggregate_billable
from .filters import filter_runs, sort_newest_first


async def summarize_workflow(
    name: str,
    runs: Iterable[Run],
    window: timedelta,
    private: bool,
    fetch_billable: BillableFetch,
    now: Optional[datetime] = None,
    sort_runs: bool = False,
) -> Workflow:
    """
    Filter a workflow's runs and total its billable time.

    Args:
        name: Workflow display name
        runs: Runs as returned by the API
        window: Lookback duration
        private: Whether the repository is private
        fetch_billable: Billing lookup for a run URL
        now: Reference time for the window
        sort_runs: Order runs newest-first instead of trusting API order

    Returns:
        Workflow with filtered runs and its own billable total
    """
    recent = filter_runs(runs, window, now)
    if sort_runs:
        recent = sort_newest_first(recent)

    billable_ms = await aggregate_billable(recent, private, fetch_billable)
    return Workflow(name=name, runs=recent, billable_ms=billable_ms)
