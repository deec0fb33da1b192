"""Resolve a screen coordinate to the tile drawn there."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ansi_chart.core.layout import ClickMap, RowMetrics


@dataclass(frozen=True)
class HitResult:
    """The tile under a click."""
    row: int
    col: int
    color_id: int


def find_row(line: int, rows: Sequence[RowMetrics]) -> Optional[int]:
    """Index of the row whose [line_start, line_start + height) holds ``line``."""
    for index, metrics in enumerate(rows):
        if metrics.contains_line(line):
            return index
    return None


def find_column(x: int, column_widths: Sequence[int]) -> Optional[int]:
    """
    Index of the column whose [offset, offset + width) holds ``x``.

    Zero-width columns keep their index but never match.
    """
    offset = 0
    for index, width in enumerate(column_widths):
        if width <= 0:
            continue
        if offset <= x < offset + width:
            return index
        offset += width
    return None


def resolve_click(
    x: int,
    y: int,
    scroll_y: int,
    rows: Sequence[RowMetrics],
    click_map: ClickMap,
) -> Optional[HitResult]:
    """
    Find the color under screen cell (x, y).

    ``y`` is a screen row; ``scroll_y`` translates it into content lines.
    Returns None for clicks on the title, gap rows, below the content or
    past the right edge.
    """
    row = find_row(y + scroll_y, rows)
    if row is None:
        return None

    col = find_column(x, rows[row].column_widths)
    if col is None:
        return None

    color_id = click_map.get(row, {}).get(col)
    if color_id is None:
        return None
    return HitResult(row, col, color_id)
