"""Repository model."""

from typing import List

from pydantic import Field

from .base import RecordModel
from .workflow import Workflow


class Repository(RecordModel):
    """Repository with its summarized workflows."""

    name: str = Field(..., description="Full repository name (owner/name)")
    private: bool = Field(False, description="Whether billing is aggregated")
    workflows: List[Workflow] = Field(default_factory=list, description="Workflows in discovery order")

    @property
    def billable_ms(self) -> int:
        """Total billed milliseconds across workflows."""
        return sum(w.billable_ms for w in self.workflows)

    @property
    def actions_url(self) -> str:
        return f"https://github.com/{self.name}/actions"
