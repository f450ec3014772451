"""Configuration models."""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class GhConfig(BaseModel):
    """gh CLI configuration."""

    binary: str = Field("gh", description="Name or path of the gh executable")
    cache_ttl: str = Field("60m", description="Value passed to `gh api --cache`")


class DashboardConfig(BaseModel):
    """Dashboard aggregation and layout defaults."""

    max_runs: int = Field(5, description="Runs considered for health and average", ge=1, le=100)
    workflow_name_length: int = Field(17, description="Max workflow name length on a card", ge=1, le=80)
    default_last: str = Field("30d", description="Default lookback window (eg 12h or 30d)")
    average_divisor: Literal["cap", "examined"] = Field(
        "cap",
        description="Divide elapsed totals by max_runs (cap) or by runs examined",
    )
    sort_runs: bool = Field(False, description="Sort runs newest-first before summarizing")
    max_concurrent: int = Field(1, description="Workflows fetched concurrently per repository", ge=1, le=32)
    width: Optional[int] = Field(None, description="Terminal width override", ge=1)

    @property
    def column_width(self) -> int:
        """Card width including ellipsis, padding and border."""
        return self.workflow_name_length + 5


class ThemeConfig(BaseModel):
    """Colors used when painting the dashboard."""

    success: str = Field("#32cd32", description="Passing run color")
    neutral: str = Field("#808080", description="Skipped/cancelled run color")
    failure: str = Field("#dc143c", description="Failed run color")
    label: str = Field("#808080", description="Card label color")
    border: str = Field("color(63)", description="Card border color")


class ConfigModel(BaseModel):
    """Main configuration model."""

    gh: GhConfig = Field(default_factory=GhConfig)
    dashboard: DashboardConfig = Field(default_factory=DashboardConfig)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
