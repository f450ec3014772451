"""Run window aggregation."""

from .billing import BillableFetch, aggregate_billable
from .elapsed import DIVIDE_BY_CAP, DIVIDE_BY_EXAMINED, average_elapsed
from .filters import DEFAULT_MAX_RUNS, filter_runs, run_prefix, sort_newest_first
from .health import HealthSymbol, classify_run, summarize_health
from .summarizer import summarize_workflow

__all__ = [
    "BillableFetch",
    "DEFAULT_MAX_RUNS",
    "DIVIDE_BY_CAP",
    "DIVIDE_BY_EXAMINED",
    "HealthSymbol",
    "aggregate_billable",
    "average_elapsed",
    "classify_run",
    "filter_runs",
    "run_prefix",
    "sort_newest_first",
    "summarize_health",
    "summarize_workflow",
]
