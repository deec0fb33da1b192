"""Tests for viewport sizing and scroll clamping."""

import pytest

from ansi_chart.core import viewport


class TestVisibleHeight:
    """Lines available for the palette."""

    def test_footer_only(self) -> None:
        assert viewport.visible_height(30) == 29

    def test_banners_reduce_height(self) -> None:
        assert viewport.visible_height(30, toast_shown=True) == 28
        assert viewport.visible_height(30, toast_shown=True, confirm_shown=True) == 27

    @pytest.mark.parametrize("height", [0, 1, 2, -4])
    def test_floor_at_one(self, height: int) -> None:
        assert viewport.visible_height(height, toast_shown=True, confirm_shown=True) == 1


class TestScroll:
    """Clamping of the scroll offset."""

    def test_content_height(self) -> None:
        assert viewport.content_height() == 74

    def test_clamp_range(self) -> None:
        assert viewport.clamp_scroll(-3, 74, 30) == 0
        assert viewport.clamp_scroll(10, 74, 30) == 10
        assert viewport.clamp_scroll(100, 74, 30) == 44

    def test_content_fits(self) -> None:
        assert viewport.max_scroll(74, 100) == 0
        assert viewport.scroll_by(0, 3, 74, 100) == 0

    def test_up_from_top_stays_at_top(self) -> None:
        assert viewport.scroll_by(0, -3, 74, 30) == 0

    def test_down_past_bottom_clamps(self) -> None:
        scroll = 0
        for _ in range(50):
            scroll = viewport.scroll_by(scroll, 3, 74, 30)
        assert scroll == 44

    def test_random_walk_stays_in_range(self) -> None:
        steps = [3, 3, -3, 3, 3, 3, -3, -3, -3, -3, -3, 3] * 10 + [3] * 30
        scroll = 0
        for step in steps:
            scroll = viewport.scroll_by(scroll, step, 74, 30)
            assert 0 <= scroll <= 44
