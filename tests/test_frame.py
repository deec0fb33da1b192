"""Tests for frame composition."""

from dataclasses import replace

from ansi_chart.core.controller import update
from ansi_chart.core.events import MouseAction, MouseEvent, ResizeEvent
from ansi_chart.core.palette import Tile
from ansi_chart.core.state import InteractionState, Mode, Toast
from ansi_chart.render.ansi_text import center, footer_line, strip_ansi, truncate, visible_len
from ansi_chart.render.frame import CONFIRM_TEXT, FOOTER_LEFT, render_frame, render_tile, render_toast


def sized(width: int, height: int) -> InteractionState:
    state, _ = update(InteractionState(), ResizeEvent(width, height))
    return state


class TestRenderTile:
    """Single swatch rendering."""

    def test_label_on_middle_line(self) -> None:
        lines = render_tile(Tile(196, 3, 0), 9, 3)
        assert [strip_ansi(line) for line in lines] == ["         ", "   196   ", "         "]
        assert "48;5;196" in lines[0]

    def test_narrow_tile_cuts_label(self) -> None:
        lines = render_tile(Tile(7, 0, 7), 2, 3)
        assert all(visible_len(line) == 2 for line in lines)

    def test_zero_width(self) -> None:
        assert render_tile(Tile(7, 0, 7), 0, 3) == ["", "", ""]


class TestRenderFrame:
    """Whole frame."""

    def test_fills_terminal_height(self) -> None:
        _, lines = render_frame(sized(96, 30))
        assert len(lines) == 30
        assert strip_ansi(lines[-1]).startswith(FOOTER_LEFT)

    def test_palette_lines_span_width(self) -> None:
        _, lines = render_frame(sized(96, 30))
        assert visible_len(lines[0]) == 96
        for line in lines[2:29]:
            assert visible_len(line) == 96

    def test_title(self) -> None:
        _, lines = render_frame(sized(96, 30))
        assert strip_ansi(lines[0]).strip() == "ANSI Colors"

    def test_stores_layout(self) -> None:
        state, _ = render_frame(sized(96, 30))
        assert len(state.row_metrics) == 24
        assert state.click_map[0][0] == 0
        assert state.click_map[23][11] == 255

    def test_layout_follows_resize(self) -> None:
        state, _ = render_frame(sized(96, 30))
        state, _ = update(state, ResizeEvent(48, 30))
        state, _ = render_frame(state)
        assert state.row_metrics[0].column_widths == (6,) * 8

    def test_scroll_clamped_on_render(self) -> None:
        state = replace(sized(96, 30), scroll_y=500)
        state, lines = render_frame(state)
        assert state.scroll_y == 45
        # Last visible palette line is the bottom of the gray ramp.
        assert "255" in strip_ansi(lines[-3])

    def test_scroll_clamped_after_grow(self) -> None:
        state = replace(sized(96, 30), scroll_y=45)
        state, _ = update(state, ResizeEvent(96, 80))
        state, _ = render_frame(state)
        assert state.scroll_y == 0

    def test_unknown_height_shows_everything(self) -> None:
        _, lines = render_frame(InteractionState())
        assert len(lines) == 74 + 1

    def test_unknown_height_resets_scroll(self) -> None:
        state, lines = render_frame(replace(InteractionState(), scroll_y=9))
        assert state.scroll_y == 0
        assert strip_ansi(lines[0]).strip() == "ANSI Colors"

    def test_failed_toast_on_colored_bar(self) -> None:
        ok = render_toast(Toast("Copied ANSI 9 to clipboard", 9, 1))
        failed = render_toast(Toast("Could not copy ANSI 9", 9, 1, failed=True))
        assert "38;5;9" in ok and "48;5;9" not in ok
        assert "48;5;9" in failed
        assert strip_ansi(failed) == "Could not copy ANSI 9"

    def test_toast_and_confirm_banners(self) -> None:
        state, _ = render_frame(sized(96, 30))
        state, _ = update(state, MouseEvent(MouseAction.LEFT_CLICK, 4, 3))
        state = replace(state, mode=Mode.CONFIRMING_QUIT)
        _, lines = render_frame(state)
        assert len(lines) == 30
        assert strip_ansi(lines[-3]) == "Copied ANSI 0 to clipboard"
        assert strip_ansi(lines[-2]) == CONFIRM_TEXT


class TestAnsiText:
    """Escape-aware string helpers."""

    def test_visible_len_ignores_sgr_and_osc(self) -> None:
        assert visible_len("\x1b[1;38;5;196mhi\x1b[0m") == 2
        assert visible_len("\x1b]8;;https://example.com\x07link\x1b]8;;\x07") == 4

    def test_truncate_keeps_escapes(self) -> None:
        out = truncate("\x1b[31mhello\x1b[0m", 3)
        assert strip_ansi(out) == "hel"
        assert out.startswith("\x1b[31m")
        assert out.endswith("\x1b[0m")

    def test_center(self) -> None:
        assert center("196", 8) == "  196   "
        assert center("196", 2) == "19"
        assert center("196", 0) == ""

    def test_footer_line(self) -> None:
        assert footer_line(10, "ab", "cd") == "ab      cd"
        assert footer_line(3, "ab", "cd") == "ab cd"
