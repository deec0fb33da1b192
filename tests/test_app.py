"""Tests for the chart application loop (no real terminal)."""

from typer.testing import CliRunner

from ansi_chart.cli.app import create_app
from ansi_chart.cli.core.input import InputReader
from ansi_chart.cli.core.terminal import TerminalSize
from ansi_chart.cli.studio.chart import POLL_INTERVAL, ChartApp
from ansi_chart.core.events import KeyEvent, MouseAction, MouseEvent
from ansi_chart.errors import ClipboardError


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


class Harness:
    """ChartApp wired to in-memory collaborators."""

    def __init__(self, width: int = 96, height: int = 30, fail_copy: bool = False) -> None:
        self.copied: list[str] = []
        self.frames: list[list[str]] = []
        self.size = TerminalSize(height, width)
        self.clock = FakeClock()
        self.fail_copy = fail_copy
        self.app = ChartApp(
            copy=self._copy,
            draw=lambda lines: self.frames.append(list(lines)),
            size=lambda: self.size,
            clock=self.clock,
        )
        self.app.running = True

    def _copy(self, text: str) -> None:
        if self.fail_copy:
            raise ClipboardError("no clipboard tool found")
        self.copied.append(text)

    def tick(self) -> None:
        """One loop iteration without waiting for input."""
        self.app.poll_resize()
        self.app.fire_due_timers()
        self.app.render()


class TestChartApp:
    """Event loop behavior."""

    def test_first_tick_picks_up_size(self) -> None:
        h = Harness()
        h.tick()
        assert (h.app.state.win_width, h.app.state.win_height) == (96, 30)
        assert len(h.frames[-1]) == 30

    def test_click_copies_color(self) -> None:
        h = Harness()
        h.tick()
        h.app.dispatch(MouseEvent(MouseAction.LEFT_CLICK, 4, 3))
        assert h.copied == ["0"]
        assert h.app.state.last_copied == "0"

    def test_toast_expires_after_delay(self) -> None:
        h = Harness()
        h.tick()
        h.app.dispatch(MouseEvent(MouseAction.LEFT_CLICK, 4, 3))
        h.clock.now += 1.0
        h.tick()
        assert h.app.state.toast is not None
        h.clock.now += 1.5
        h.tick()
        assert h.app.state.toast is None

    def test_rapid_clicks_keep_latest_toast(self) -> None:
        h = Harness()
        h.tick()
        h.app.dispatch(MouseEvent(MouseAction.LEFT_CLICK, 4, 3))
        h.clock.now += 1.5
        h.app.dispatch(MouseEvent(MouseAction.LEFT_CLICK, 16, 3))
        h.clock.now += 1.0
        h.tick()
        assert h.app.state.toast is not None
        assert h.app.state.toast.text == "Copied ANSI 1 to clipboard"
        h.clock.now += 1.0
        h.tick()
        assert h.app.state.toast is None

    def test_clipboard_failure_shows_toast(self) -> None:
        h = Harness(fail_copy=True)
        h.tick()
        h.app.dispatch(MouseEvent(MouseAction.LEFT_CLICK, 4, 3))
        assert h.app.state.toast.failed
        assert "Could not copy ANSI 0" in h.app.state.toast.text

    def test_resize_relayouts(self) -> None:
        h = Harness()
        h.tick()
        h.size = TerminalSize(30, 48)
        h.tick()
        h.app.dispatch(MouseEvent(MouseAction.LEFT_CLICK, 6, 3))
        assert h.copied == ["1"]

    def test_quit(self) -> None:
        h = Harness()
        h.app.dispatch(KeyEvent(char="q", raw="q"))
        assert h.app.running is False

    def test_confirmed_quit(self) -> None:
        h = Harness()
        h.app.dispatch(KeyEvent(char="g", raw="g"))
        h.app.dispatch(KeyEvent(char="n", raw="n"))
        assert h.app.running is True
        h.app.dispatch(KeyEvent(char="g", raw="g"))
        h.app.dispatch(KeyEvent(char="y", raw="y"))
        assert h.app.running is False

    def test_input_events_dispatched(self) -> None:
        h = Harness()
        h.tick()
        h.app.input = InputReader(fd=-1)
        h.app.input.feed("\x1b[<0;5;4M")
        h.app._handle_input()
        assert h.copied == ["0"]

    def test_next_timeout(self) -> None:
        h = Harness()
        assert h.app.next_timeout() == POLL_INTERVAL
        h.tick()
        h.app.dispatch(MouseEvent(MouseAction.LEFT_CLICK, 4, 3))
        h.clock.now += 1.99
        assert 0 <= h.app.next_timeout() <= POLL_INTERVAL


class TestCli:
    """Typer entry point."""

    def test_help(self) -> None:
        result = CliRunner().invoke(create_app(), ["--help"])
        assert result.exit_code == 0
        assert "--scroll-step" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(create_app(), ["--version"])
        assert result.exit_code == 0
        assert "ansi-chart" in result.output

    def test_not_a_terminal(self) -> None:
        result = CliRunner().invoke(create_app(), [])
        assert result.exit_code == 1

    def test_rejects_bad_scroll_step(self) -> None:
        result = CliRunner().invoke(create_app(), ["--scroll-step", "0"])
        assert result.exit_code != 0
