"""Workflow summary model."""

from typing import List

from pydantic import Field

from .base import RecordModel
from .run import Run


class Workflow(RecordModel):
    """Summary of one workflow's recent runs."""

    name: str = Field(..., description="Workflow display name")
    runs: List[Run] = Field(default_factory=list, description="Filtered runs, newest first")
    billable_ms: int = Field(0, description="Billed milliseconds for this workflow's runs", ge=0)
