"""Dashboard assembly and printing."""

from typing import List

from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.table import Table
from rich.text import Text

from ..config import DashboardConfig, ThemeConfig
from ..models import DashboardReport, Repository
from .cards import render_card
from .formatting import fuzzy_span, pretty_ms
from .layout import cards_per_row, layout_rows


def resolve_cards_per_row(terminal_width: int, settings: DashboardConfig) -> int:
    """Cards per row for a terminal, never less than one."""
    return max(1, cards_per_row(terminal_width, settings.column_width))


def render_repository(
    repo: Repository,
    per_row: int,
    settings: DashboardConfig,
    theme: ThemeConfig,
) -> List[RenderableType]:
    """Header and card rows for one repository."""
    renderables: List[RenderableType] = [
        Text(""),
        Text.assemble((repo.name, "bold"), (f" {repo.actions_url}", f"italic {theme.label}")),
        Text(""),
    ]

    cards = [render_card(w, settings, theme) for w in repo.workflows]
    for row in layout_rows(cards, per_row):
        grid = Table.grid(padding=0)
        for _ in row:
            grid.add_column(vertical="top")
        grid.add_row(*row)
        renderables.append(grid)

    return renderables


def build_dashboard(
    report: DashboardReport,
    terminal_width: int,
    settings: DashboardConfig,
    theme: ThemeConfig,
) -> Group:
    """Build the full dashboard renderable."""
    title = Text(
        f"GitHub Actions dashboard for {report.selector} for the past {fuzzy_span(report.window)}",
        style="bold",
    )
    subtitle = Text(f"Total billable time: {pretty_ms(report.total_billable_ms)}")

    renderables: List[RenderableType] = [
        Align.center(title, width=terminal_width),
        Align.center(subtitle, width=terminal_width),
    ]

    per_row = resolve_cards_per_row(terminal_width, settings)
    for repo in report.repositories:
        if not repo.workflows:
            continue
        renderables.extend(render_repository(repo, per_row, settings, theme))

    return Group(*renderables)


def print_dashboard(
    report: DashboardReport,
    console: Console,
    settings: DashboardConfig,
    theme: ThemeConfig,
    terminal_width: int,
) -> None:
    """Print the dashboard for a collected report."""
    console.print(build_dashboard(report, terminal_width, settings, theme), width=terminal_width)
