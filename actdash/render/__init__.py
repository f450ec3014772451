"""Terminal rendering of dashboard reports."""

from .cards import ELLIPSIS, render_card, render_health, truncate_name
from .dashboard import build_dashboard, print_dashboard, resolve_cards_per_row
from .formatting import format_duration, fuzzy_span, pretty_ms
from .layout import cards_per_row, layout_rows

__all__ = [
    "ELLIPSIS",
    "build_dashboard",
    "cards_per_row",
    "format_duration",
    "fuzzy_span",
    "layout_rows",
    "pretty_ms",
    "print_dashboard",
    "render_card",
    "render_health",
    "resolve_cards_per_row",
    "truncate_name",
]
