"""Run model for a single CI execution."""

from datetime import datetime, timedelta
from typing import Optional

from pydantic import Field

from .base import RecordModel

COMPLETED = "completed"


class Run(RecordModel):
    """Workflow run model."""

    status: str = Field(..., description="Run status (queued, in_progress, completed, ...)")
    conclusion: Optional[str] = Field(None, description="Run conclusion, set once completed")
    finished_at: Optional[datetime] = Field(None, description="Completion timestamp")
    elapsed: timedelta = Field(timedelta(0), description="Time between creation and completion")
    url: str = Field("", description="API URL of the run")

    @property
    def completed(self) -> bool:
        return self.status == COMPLETED
