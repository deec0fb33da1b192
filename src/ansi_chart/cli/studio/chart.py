"""Interactive color chart application."""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from typing import Callable, Optional, Sequence

from ansi_chart.cli.clipboard import write_text
from ansi_chart.cli.core.input import InputReader
from ansi_chart.cli.core.terminal import Terminal, TerminalSize
from ansi_chart.core.constants import DEFAULT_SETTINGS, Settings
from ansi_chart.core.controller import CopyText, Quit, ScheduleTimer, update
from ansi_chart.core.events import CopyFailedEvent, Event, ResizeEvent, TimerEvent
from ansi_chart.core.state import InteractionState
from ansi_chart.errors import ClipboardError
from ansi_chart.render.frame import render_frame

logger = logging.getLogger(__name__)

# Longest time the loop blocks on input with no timer pending.
POLL_INTERVAL = 0.05


class ChartApp:
    """
    xterm-256 color chart with click-to-copy.

    The loop runs one event at a time:
    - poll the terminal size and turn changes into resize events
    - deliver timers that came due
    - render a fresh frame
    - wait for input (never past the next timer deadline)

    Controls:
        Click: copy the color number under the pointer
        Wheel: scroll
        q / Ctrl+C: quit
        g: quit with confirmation (y/Enter to confirm, n/Esc to cancel)
    """

    def __init__(
        self,
        settings: Settings = DEFAULT_SETTINGS,
        copy: Callable[[str], None] = write_text,
        draw: Callable[[Sequence[str]], None] = Terminal.draw,
        size: Callable[[], TerminalSize] = Terminal.size,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.running = False
        self.settings = settings
        self.state = InteractionState()
        self.input: Optional[InputReader] = None

        self._copy = copy
        self._draw = draw
        self._size = size
        self._clock = clock
        self._timers: list[tuple[float, int, TimerEvent]] = []
        self._timer_seq = itertools.count()

    def run(self) -> None:
        """Main application loop. Returns when the user quits."""
        self.running = True
        with Terminal.managed_mode():
            if self.input is None:
                self.input = InputReader()
            while self.running:
                self.poll_resize()
                self.fire_due_timers()
                if not self.running:
                    break
                self.render()
                self._handle_input()

    def dispatch(self, event: Event) -> None:
        """Run one event through the controller and carry out its commands."""
        self.state, commands = update(self.state, event, self.settings)
        for command in commands:
            if isinstance(command, Quit):
                self.running = False
            elif isinstance(command, CopyText):
                self._copy_text(command)
            elif isinstance(command, ScheduleTimer):
                deadline = self._clock() + command.delay
                heapq.heappush(self._timers, (deadline, next(self._timer_seq), command.event))

    def render(self) -> list[str]:
        """Build and draw the next frame."""
        self.state, lines = render_frame(self.state)
        self._draw(lines)
        return lines

    def poll_resize(self) -> None:
        size = self._size()
        if (size.cols, size.rows) != (self.state.win_width, self.state.win_height):
            self.dispatch(ResizeEvent(size.cols, size.rows))

    def fire_due_timers(self) -> None:
        now = self._clock()
        while self._timers and self._timers[0][0] <= now:
            _, _, event = heapq.heappop(self._timers)
            self.dispatch(event)

    def next_timeout(self) -> float:
        """How long the loop may wait for input."""
        if not self._timers:
            return POLL_INTERVAL
        return max(0.0, min(POLL_INTERVAL, self._timers[0][0] - self._clock()))

    def _handle_input(self) -> None:
        assert self.input is not None
        event = self.input.read(timeout=self.next_timeout())
        if event is not None:
            self.dispatch(event)

    def _copy_text(self, command: CopyText) -> None:
        try:
            self._copy(command.text)
        except ClipboardError as e:
            logger.warning("Clipboard copy of %s failed: %s", command.text, e)
            self.dispatch(CopyFailedEvent(command.color_id, command.generation, str(e)))


def run_chart(settings: Settings = DEFAULT_SETTINGS) -> None:
    """Launch the chart application."""
    app = ChartApp(settings)
    app.run()


if __name__ == "__main__":
    run_chart()
