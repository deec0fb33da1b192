"""Compose a full text frame for the chart.

The frame is rebuilt from nothing on every call: palette, layout, click
map and row metrics are all derived from the state's current window size.
The caller stores the returned state so the next click is resolved
against exactly what was drawn.

Frame layout (top to bottom):
    title + blank line      } scrollable buffer, sliced to the
    palette rows            } visible height at scroll_y
    toast line              (only while a toast is shown)
    quit confirmation       (only while confirming)
    footer
"""

from __future__ import annotations

from dataclasses import replace

from ansi_chart.core.color import Color, sgr
from ansi_chart.core.constants import RESET
from ansi_chart.core.layout import ChartLayout, compute_layout
from ansi_chart.core.palette import PaletteRow, Tile
from ansi_chart.core.state import InteractionState, Toast
from ansi_chart.core import viewport
from ansi_chart.render.ansi_text import center, footer_line, truncate

TITLE = "ANSI Colors"
CONFIRM_TEXT = "Quit? Press y to confirm, n to cancel."
FOOTER_LEFT = "Press q or Ctrl+C to quit."
FOOTER_RIGHT = "Click a swatch to copy its number"

TITLE_STYLE = sgr("1", Color.BRIGHT_WHITE.to_sgr_fg())
INFO_STYLE = sgr(Color.BRIGHT_GREEN.to_sgr_fg())
FOOTER_STYLE = sgr(Color.BRIGHT_BLACK.to_sgr_fg())


def render_tile(tile: Tile, width: int, height: int) -> list[str]:
    """Render one swatch as ``height`` lines of exactly ``width`` cells."""
    if width <= 0:
        return [""] * height

    color = Color(tile.color_id)
    style = sgr(color.to_sgr_bg(), color.contrast().to_sgr_fg())
    blank = ' ' * width
    label_line = height // 2

    lines: list[str] = []
    for i in range(height):
        body = center(color.label, width) if i == label_line else blank
        lines.append(f"{style}{body}{RESET}")
    return lines


def render_row(prow: PaletteRow, widths: tuple[int, ...], height: int, total_width: int) -> list[str]:
    """Join a row's tiles side by side. Gap rows render as blank lines."""
    if prow.is_gap:
        return [' ' * max(0, total_width)] * height

    columns = [render_tile(tile, widths[tile.col], height) for tile in prow.tiles]
    return [''.join(col[i] for col in columns) for i in range(height)]


def render_content(layout: ChartLayout) -> list[str]:
    """The full scrollable buffer: title block and every palette row."""
    title_width = layout.width if layout.width > 0 else len(TITLE)
    lines = [f"{TITLE_STYLE}{center(TITLE, title_width)}{RESET}", ""]

    for prow, metrics in zip(layout.palette, layout.rows):
        lines.extend(render_row(prow, metrics.column_widths, metrics.height, layout.width))
    return lines


def render_toast(toast: Toast) -> str:
    """Copy notices print in the toast color; failures print on a bar of it."""
    color = Color(toast.color)
    if toast.failed:
        style = sgr("1", color.to_sgr_bg(), color.contrast().to_sgr_fg())
    else:
        style = sgr("1", color.to_sgr_fg())
    return f"{style}{toast.text}{RESET}"


def render_footer(width: int) -> str:
    left = f"{FOOTER_STYLE}{FOOTER_LEFT}{RESET}"
    right = f"{FOOTER_STYLE}{FOOTER_RIGHT}{RESET}"
    return footer_line(width, left, right)


def render_frame(state: InteractionState) -> tuple[InteractionState, list[str]]:
    """
    Lay out and draw one frame.

    Returns the state with the fresh click map, row metrics and a scroll
    offset clamped to the current viewport, plus the lines to display.
    """
    layout = compute_layout(state.win_width)
    content = render_content(layout)

    scroll_y = state.scroll_y
    if state.win_height <= 0:
        # Size not known yet: show everything from the top.
        scroll_y = 0
        view = content
    else:
        visible = viewport.visible_height(
            state.win_height,
            toast_shown=state.toast_shown,
            confirm_shown=state.confirm_quit_pending,
        )
        scroll_y = viewport.clamp_scroll(scroll_y, len(content), visible)
        view = content[scroll_y:scroll_y + visible]

    banners: list[str] = []
    if state.toast is not None:
        banners.append(render_toast(state.toast))
    if state.confirm_quit_pending:
        banners.append(f"{INFO_STYLE}{CONFIRM_TEXT}{RESET}")
    banners.append(render_footer(state.win_width))
    if state.win_width > 0:
        # A wrapped banner would push the frame down by a line.
        banners = [truncate(line, state.win_width) for line in banners]

    lines = list(view) + banners

    new_state = replace(
        state,
        click_map=layout.click_map,
        row_metrics=layout.rows,
        scroll_y=scroll_y,
    )
    return new_state, lines
