"""Palette, layout, hit-testing and the interaction model."""

from ansi_chart.core.color import Color
from ansi_chart.core.palette import PaletteRow, Section, Tile, generate_rows, generate_tiles
from ansi_chart.core.layout import ChartLayout, RowMetrics, calc_row_widths, compute_layout
from ansi_chart.core.hit_test import HitResult, resolve_click
from ansi_chart.core import viewport
from ansi_chart.core.state import InteractionState, Mode, Toast
from ansi_chart.core.controller import update

__all__ = [
    "Color",
    "PaletteRow",
    "Section",
    "Tile",
    "generate_rows",
    "generate_tiles",
    "ChartLayout",
    "RowMetrics",
    "calc_row_widths",
    "compute_layout",
    "HitResult",
    "resolve_click",
    "viewport",
    "InteractionState",
    "Mode",
    "Toast",
    "update",
]
