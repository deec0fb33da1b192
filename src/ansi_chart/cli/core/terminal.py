"""Low-level terminal operations - platform-independent abstraction."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from ansi_chart.core.constants import CLEAR_EOL, CLEAR_EOS, RESET
from ansi_chart.errors import StartupError
from ansi_chart.render.ansi_text import visible_len

# xterm mouse modes: 1000 = report presses/releases/wheel, 1006 = SGR coordinates
_MOUSE_ON = '\x1b[?1000h\x1b[?1006h'
_MOUSE_OFF = '\x1b[?1006l\x1b[?1000l'


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Terminal I/O abstraction for the chart."""

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size(sys.stdout.fileno())
            return TerminalSize(size.lines, size.columns)
        except (OSError, ValueError):
            return TerminalSize(24, 80)

    @staticmethod
    def check_interactive() -> None:
        """
        Make sure both ends are attached to a terminal.

        Raises:
            StartupError: If stdin or stdout is redirected.
        """
        for name, stream in (("stdin", sys.stdin), ("stdout", sys.stdout)):
            try:
                interactive = stream is not None and stream.isatty()
            except ValueError:
                interactive = False
            if not interactive:
                raise StartupError(f"{name} is not a terminal")

    @staticmethod
    def hide_cursor() -> None:
        """Hide the cursor."""
        sys.stdout.write('\x1b[?25l')
        sys.stdout.flush()

    @staticmethod
    def show_cursor() -> None:
        """Show the cursor."""
        sys.stdout.write('\x1b[?25h')
        sys.stdout.flush()

    @staticmethod
    def reset() -> None:
        """Reset all terminal attributes."""
        sys.stdout.write(RESET)
        sys.stdout.flush()

    @staticmethod
    def draw(lines: Sequence[str], width: Optional[int] = None) -> None:
        """
        Draw a complete frame from the top-left corner.

        Short lines clear to end of line and everything from the last
        line down is erased first, so no clear-screen (and no flicker) is
        needed. A line that fills the whole width leaves the cursor pending
        a wrap, where any erase would wipe its last cell, so nothing is
        erased after such a line.
        """
        if width is None:
            width = Terminal.size().cols
        parts = []
        for line in lines:
            tail = RESET if visible_len(line) >= width else f"{RESET}{CLEAR_EOL}"
            parts.append(f"{line}{tail}")
        if parts:
            parts[-1] = CLEAR_EOS + parts[-1]
        else:
            parts.append(CLEAR_EOS)
        sys.stdout.write('\x1b[H' + '\r\n'.join(parts))
        sys.stdout.flush()

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            # Windows or no termios - just yield
            yield
            return

        fd = sys.stdin.fileno()
        try:
            old_settings = termios.tcgetattr(fd)
            tty.setraw(fd)
        except termios.error as e:
            raise StartupError(f"Cannot switch terminal to raw mode: {e}") from e
        try:
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def alternate_screen() -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        sys.stdout.write('\x1b[?1049h')
        sys.stdout.flush()
        try:
            yield
        finally:
            sys.stdout.write('\x1b[?1049l')
            sys.stdout.flush()

    @staticmethod
    @contextmanager
    def mouse_tracking() -> Iterator[None]:
        """Report clicks and wheel steps as SGR mouse sequences."""
        sys.stdout.write(_MOUSE_ON)
        sys.stdout.flush()
        try:
            yield
        finally:
            sys.stdout.write(_MOUSE_OFF)
            sys.stdout.flush()

    @staticmethod
    @contextmanager
    def managed_mode() -> Iterator[None]:
        """Full TUI mode: alternate screen, hidden cursor, raw input, mouse."""
        Terminal.check_interactive()
        with Terminal.alternate_screen():
            Terminal.hide_cursor()
            try:
                with Terminal.raw_mode(), Terminal.mouse_tracking():
                    yield
            finally:
                Terminal.show_cursor()
                Terminal.reset()
