"""Payload models for gh api responses."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..models import COMPLETED, Run


class RepositoryPayload(BaseModel):
    """Repository as returned by the repos endpoints."""

    name: str = Field(..., alias="full_name", description="Full repository name")
    private: bool = Field(False, description="Whether the repository is private")

    class Config:
        """Pydantic config."""

        populate_by_name = True


class WorkflowPayload(BaseModel):
    """Workflow definition from the actions/workflows listing."""

    id: int = Field(..., description="Workflow ID")
    state: str = Field("active", description="Workflow state (active, disabled_manually, ...)")
    name: str = Field(..., description="Workflow name")
    url: str = Field(..., description="Workflow API URL")

    @property
    def disabled(self) -> bool:
        return self.state.startswith("disabled")


class RunPayload(BaseModel):
    """Workflow run from the workflow runs listing."""

    id: int = Field(..., description="Run ID")
    created_at: datetime = Field(..., description="When the run was created")
    updated_at: datetime = Field(..., description="Last update, the completion time once completed")
    status: str = Field(..., description="Run status")
    conclusion: Optional[str] = Field(None, description="Run conclusion")
    url: str = Field("", description="Run API URL")

    def to_run(self) -> Run:
        """Convert to a Run, deriving completion time and elapsed time."""
        if self.status != COMPLETED:
            return Run(status=self.status, conclusion=self.conclusion, url=self.url)

        return Run(
            status=self.status,
            conclusion=self.conclusion,
            finished_at=self.updated_at,
            elapsed=self.updated_at - self.created_at,
            url=self.url,
        )


class PlatformTiming(BaseModel):
    """Billed time on one runner platform."""

    total_ms: int = Field(0, description="Billed milliseconds")


class BillablePayload(BaseModel):
    """Billable section of a run timing response."""

    macos: PlatformTiming = Field(default_factory=PlatformTiming, alias="MACOS")
    windows: PlatformTiming = Field(default_factory=PlatformTiming, alias="WINDOWS")
    ubuntu: PlatformTiming = Field(default_factory=PlatformTiming, alias="UBUNTU")

    class Config:
        """Pydantic config."""

        populate_by_name = True

    @property
    def total_ms(self) -> int:
        """Billed milliseconds summed over macOS, Windows and Linux."""
        return self.macos.total_ms + self.windows.total_ms + self.ubuntu.total_ms
