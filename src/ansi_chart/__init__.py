"""
ansi-chart: interactive xterm-256 color chart

Shows every color of the 256-color palette as a clickable swatch and
copies the clicked color's number to the system clipboard.

Quick Start:
    $ ansi-chart

Library use:
    >>> from ansi_chart import compute_layout, resolve_click
    >>> layout = compute_layout(96)
    >>> resolve_click(4, 3, 0, layout.rows, layout.click_map).color_id
    0
"""

__version__ = "0.1.0"

from ansi_chart.core.palette import Tile, generate_tiles
from ansi_chart.core.layout import ChartLayout, RowMetrics, compute_layout
from ansi_chart.core.hit_test import HitResult, resolve_click
from ansi_chart.core.state import InteractionState
from ansi_chart.core.controller import update
from ansi_chart.render.frame import render_frame
from ansi_chart.errors import ChartError, ClipboardError, StartupError

__all__ = [
    # Version
    "__version__",
    # Palette and layout
    "Tile",
    "generate_tiles",
    "ChartLayout",
    "RowMetrics",
    "compute_layout",
    # Interaction
    "HitResult",
    "resolve_click",
    "InteractionState",
    "update",
    "render_frame",
    # Errors
    "ChartError",
    "ClipboardError",
    "StartupError",
]
