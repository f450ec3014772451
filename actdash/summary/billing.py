"""Billable time aggregation."""

from typing import Awaitable, Callable, Iterable

from ..models import Run

BillableFetch = Callable[[str], Awaitable[int]]


async def aggregate_billable(
    runs: Iterable[Run],
    private: bool,
    fetch_billable: BillableFetch,
) -> int:
    """
    Total billed milliseconds for one workflow's runs.

    Public repositories are not billed, so no fetch is made and the total is
    zero. The total covers only the runs passed in.

    Args:
        runs: Filtered runs of a single workflow
        private: Whether the repository is private
        fetch_billable: Returns billed milliseconds for a run URL
    """
    if not private:
        return 0

    total_ms = 0
    for run in runs:
        total_ms += await fetch_billable(run.url)
    return total_ms
