"""Dashboard snapshot model."""

from datetime import timedelta
from typing import List

from pydantic import Field

from .base import RecordModel
from .repository import Repository


class DashboardReport(RecordModel):
    """Everything needed to print one dashboard."""

    selector: str = Field(..., description="Organization or user name")
    window: timedelta = Field(..., description="Lookback window")
    repositories: List[Repository] = Field(default_factory=list, description="Repositories in discovery order")

    @property
    def total_billable_ms(self) -> int:
        """Billed milliseconds across all repositories."""
        return sum(r.billable_ms for r in self.repositories)
