"""Card grid layout."""

import math
from typing import List, Sequence, TypeVar

T = TypeVar("T")


def cards_per_row(terminal_width: int, column_width: int) -> int:
    """
    Number of cards that fit on one row.

    One column is held back so card borders never wrap. The result can be
    zero or negative on narrow terminals; callers must clamp it.
    """
    return terminal_width // column_width - 1


def layout_rows(cards: Sequence[T], per_row: int) -> List[List[T]]:
    """
    Pack cards into rows of ``per_row``, preserving order.

    Requires ``per_row >= 1``. Every row but the last is full.

    Args:
        cards: Rendered cards in workflow discovery order
        per_row: Cards per row

    Returns:
        ``ceil(len(cards) / per_row)`` rows
    """
    total_rows = math.ceil(len(cards) / per_row)
    rows: List[List[T]] = [[] for _ in range(total_rows)]
    row_index = 0

    for card in cards:
        if len(rows[row_index]) == per_row:
            row_index += 1
        rows[row_index].append(card)

    return rows
