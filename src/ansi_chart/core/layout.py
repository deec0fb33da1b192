"""Width-responsive layout for the color chart.

Every section spans the full terminal width: the width is split evenly
among the section's columns and the remainder goes one cell at a time to
the leftmost columns. All rows are the same height.

Line numbering is in content space: line 0 is the title, line 1 is blank,
and logical row 0 starts at line ``TITLE_LINES``.

The layout is recomputed from scratch for every frame. A cached layout
from before a resize would silently map clicks to the wrong tiles.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ansi_chart.core.constants import DEFAULT_TILE_WIDTH, TILE_HEIGHT, TITLE_LINES
from ansi_chart.core.palette import PaletteRow, Section, generate_rows, section_columns

ClickMap = dict[int, dict[int, int]]


@dataclass(frozen=True)
class RowMetrics:
    """Where a logical row sits on screen."""
    line_start: int
    height: int
    column_widths: tuple[int, ...] = ()

    @property
    def line_end(self) -> int:
        """First line after this row."""
        return self.line_start + self.height

    def contains_line(self, line: int) -> bool:
        return self.line_start <= line < self.line_end


@dataclass
class ChartLayout:
    """Computed layout for one frame."""
    width: int
    rows: tuple[RowMetrics, ...]
    palette: tuple[PaletteRow, ...]
    click_map: ClickMap = field(default_factory=dict)

    @property
    def total_lines(self) -> int:
        """Lines occupied by the palette rows (title excluded)."""
        return sum(m.height for m in self.rows)

    @property
    def content_height(self) -> int:
        """Lines in the full scrollable buffer, title included."""
        return TITLE_LINES + self.total_lines


def calc_row_widths(total_width: int, cols: int) -> list[int]:
    """
    Split ``total_width`` cells among ``cols`` columns.

    Widths differ by at most one and sum to ``total_width``. When the width
    is unknown (<= 0) every column falls back to DEFAULT_TILE_WIDTH. When
    there are fewer cells than columns the trailing columns get width 0.
    """
    if cols <= 0:
        return []
    if total_width <= 0:
        total_width = cols * DEFAULT_TILE_WIDTH
    base, extra = divmod(total_width, cols)
    return [base + 1 if i < extra else base for i in range(cols)]


def layout_row_heights(total_rows: int) -> tuple[list[int], int]:
    """Return per-row heights and their sum."""
    heights = [max(1, TILE_HEIGHT) for _ in range(total_rows)]
    return heights, sum(heights)


def compute_layout(total_width: int) -> ChartLayout:
    """
    Lay out the full palette for a terminal ``total_width`` cells wide.

    Returns row metrics for every logical row (gap rows have no columns)
    and the click map from (row, column) to color id. Gap rows are never
    registered in the click map.
    """
    palette = generate_rows()
    heights, _ = layout_row_heights(len(palette))

    widths_by_section = {
        section: tuple(calc_row_widths(total_width, section_columns(section)))
        for section in (Section.SYSTEM, Section.CUBE, Section.GRAY)
    }

    rows: list[RowMetrics] = []
    click_map: ClickMap = {}
    line = TITLE_LINES
    for prow, height in zip(palette, heights):
        if prow.is_gap:
            rows.append(RowMetrics(line, height))
        else:
            rows.append(RowMetrics(line, height, widths_by_section[prow.section]))
            click_map[prow.index] = {tile.col: tile.color_id for tile in prow.tiles}
        line += height

    return ChartLayout(
        width=total_width,
        rows=tuple(rows),
        palette=tuple(palette),
        click_map=click_map,
    )
