"""Workflow summary cards."""

from typing import Sequence

from rich import box
from rich.panel import Panel
from rich.text import Text

from ..config import DashboardConfig, ThemeConfig
from ..models import Workflow
from ..summary import HealthSymbol, average_elapsed, summarize_health
from .formatting import format_duration, pretty_ms

ELLIPSIS = "..."

HEALTH_GLYPHS = {
    HealthSymbol.PASS: "✓",
    HealthSymbol.FAIL: "x",
    HealthSymbol.NEUTRAL: "-",
    HealthSymbol.UNKNOWN: "-",
}


def truncate_name(name: str, length: int) -> str:
    """Cut a name to ``length`` characters and mark the cut with an ellipsis."""
    if len(name) > length:
        return name[:length] + ELLIPSIS
    return name


def render_health(symbols: Sequence[HealthSymbol], theme: ThemeConfig) -> Text:
    """Paint health symbols."""
    styles = {
        HealthSymbol.PASS: theme.success,
        HealthSymbol.FAIL: theme.failure,
        HealthSymbol.NEUTRAL: theme.neutral,
        HealthSymbol.UNKNOWN: theme.neutral,
    }
    text = Text()
    for symbol in symbols:
        text.append(HEALTH_GLYPHS[symbol], style=styles[symbol])
    return text


def card_body(workflow: Workflow, settings: DashboardConfig, theme: ThemeConfig) -> Text:
    """Text content of a workflow card."""
    lines = [Text(truncate_name(workflow.name, settings.workflow_name_length), style="bold")]

    # Runs are already filtered to the lookback window
    if not workflow.runs:
        lines.append(Text("No runs", style=theme.label))
        return Text("\n").join(lines)

    health = summarize_health(workflow.runs, settings.max_runs)
    avg = average_elapsed(workflow.runs, settings.max_runs, settings.average_divisor)

    lines.append(Text.assemble(("Health:", theme.label), " ", render_health(health, theme)))
    lines.append(Text.assemble(("Avg elapsed:", theme.label), f" {format_duration(avg)}"))
    if workflow.billable_ms:
        lines.append(Text.assemble(("Billable time:", theme.label), f" {pretty_ms(workflow.billable_ms)}"))

    return Text("\n").join(lines)


def render_card(workflow: Workflow, settings: DashboardConfig, theme: ThemeConfig) -> Panel:
    """
    Render a workflow as a fixed width card.

    The panel is exactly ``settings.column_width`` wide: two border columns
    around a truncated name plus ellipsis.
    """
    return Panel(
        card_body(workflow, settings, theme),
        box=box.DOUBLE,
        border_style=theme.border,
        width=settings.column_width,
        padding=(1, 0),
    )
