"""Palette generator - the fixed sequence of tiles shown by the chart.

The chart has three sections, separated by one blank gap row each:

- SYSTEM:  2 rows x 8 columns, ids 0-15
- CUBE:    3 tiers x 6 rows x 12 columns, ids 16-231
- GRAY:    2 rows x 12 columns, ids 232-255

Cube rows are folded into a 12-wide "palindrome": the left six columns
walk the cube forward and the right six walk it back from the far end of
the tier, so color bands appear mirrored around column 6.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from ansi_chart.core.constants import (
    CUBE_COLS,
    CUBE_ROWS,
    CUBE_TIERS,
    GRAY_COLS,
    GRAY_ROWS,
    SECTION_GAP_ROWS,
    SYSTEM_COLS,
    SYSTEM_ROWS,
    TOTAL_ROWS,
)


class Section(Enum):
    """Which part of the palette a logical row belongs to."""
    SYSTEM = "system"
    CUBE = "cube"
    GRAY = "gray"
    GAP = "gap"


@dataclass(frozen=True)
class Tile:
    """One swatch: a color id at a logical (row, column)."""
    color_id: int
    row: int
    col: int


@dataclass(frozen=True)
class PaletteRow:
    """A logical row of the chart."""
    index: int
    section: Section
    tiles: tuple[Tile, ...] = ()

    @property
    def columns(self) -> int:
        return len(self.tiles)

    @property
    def is_gap(self) -> bool:
        return self.section is Section.GAP


CUBE_START = SYSTEM_ROWS + SECTION_GAP_ROWS
CUBE_END = CUBE_START + CUBE_TIERS * CUBE_ROWS
GRAY_START = CUBE_END + SECTION_GAP_ROWS


def section_for_row(row: int) -> Section:
    """Map a logical row index to its section."""
    if not 0 <= row < TOTAL_ROWS:
        raise IndexError(f"Row {row} outside palette (0-{TOTAL_ROWS - 1})")
    if row < SYSTEM_ROWS:
        return Section.SYSTEM
    if row < CUBE_START:
        return Section.GAP
    if row < CUBE_END:
        return Section.CUBE
    if row < GRAY_START:
        return Section.GAP
    return Section.GRAY


def section_columns(section: Section) -> int:
    """Number of tiles per row in a section (0 for gaps)."""
    return {
        Section.SYSTEM: SYSTEM_COLS,
        Section.CUBE: CUBE_COLS,
        Section.GRAY: GRAY_COLS,
        Section.GAP: 0,
    }[section]


def system_id(row: int, col: int) -> int:
    return row * SYSTEM_COLS + col


def cube_id(tier: int, row: int, col: int) -> int:
    """Color id for a cube tile, folding the right half back on itself."""
    base = 16 + tier * 72
    half = CUBE_COLS // 2
    if col < half:
        return base + col * 6 + row
    return base + 66 - (col - half) * 6 + row


def gray_id(row: int, col: int) -> int:
    return 232 + row * GRAY_COLS + col


def color_id_at(row: int, col: int) -> int:
    """
    Color id for a logical (row, column).

    Raises:
        IndexError: If the position is a gap row or past the section width.
    """
    section = section_for_row(row)
    if not 0 <= col < section_columns(section):
        raise IndexError(f"No tile at row {row}, column {col}")
    if section is Section.SYSTEM:
        return system_id(row, col)
    if section is Section.CUBE:
        tier, tier_row = divmod(row - CUBE_START, CUBE_ROWS)
        return cube_id(tier, tier_row, col)
    return gray_id(row - GRAY_START, col)


def generate_rows() -> list[PaletteRow]:
    """Build all logical rows of the chart, gaps included."""
    rows: list[PaletteRow] = []
    for index in range(TOTAL_ROWS):
        section = section_for_row(index)
        tiles = tuple(
            Tile(color_id_at(index, col), index, col)
            for col in range(section_columns(section))
        )
        rows.append(PaletteRow(index, section, tiles))
    return rows


def generate_tiles() -> Iterator[Tile]:
    """Yield every tile in row-major order."""
    for row in generate_rows():
        yield from row.tiles
