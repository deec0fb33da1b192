"""Viewport height and scroll clamping."""

from __future__ import annotations

from ansi_chart.core.constants import FOOTER_LINES, TITLE_LINES, TOTAL_ROWS
from ansi_chart.core.layout import layout_row_heights


def content_height() -> int:
    """Lines in the scrollable buffer: title block plus every palette row."""
    _, total = layout_row_heights(TOTAL_ROWS)
    return total + TITLE_LINES


def visible_height(win_height: int, toast_shown: bool = False, confirm_shown: bool = False) -> int:
    """
    Lines left for the palette after the footer and banners.

    Never less than 1.
    """
    visible = win_height - FOOTER_LINES - int(toast_shown) - int(confirm_shown)
    return max(1, visible)


def max_scroll(content: int, visible: int) -> int:
    return max(0, content - visible)


def clamp_scroll(scroll_y: int, content: int, visible: int) -> int:
    """Clamp ``scroll_y`` into [0, max_scroll]."""
    return min(max(0, scroll_y), max_scroll(content, visible))


def scroll_by(scroll_y: int, delta: int, content: int, visible: int) -> int:
    """Move the viewport by ``delta`` lines and clamp."""
    return clamp_scroll(scroll_y + delta, content, visible)
