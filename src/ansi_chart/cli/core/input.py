"""Keyboard and mouse input decoding."""

from __future__ import annotations

import os
import select
import sys
import time
from typing import Optional, Union

from ansi_chart.core.events import Key, KeyEvent, MouseAction, MouseEvent

InputEvent = Union[KeyEvent, MouseEvent]


def parse_sgr_mouse(seq: str) -> Optional[MouseEvent]:
    """
    Decode an SGR mouse report (without the leading ESC).

    Format is ``[<b;x;yM`` for presses and ``[<b;x;ym`` for releases, with
    1-based coordinates. Returns None if ``seq`` is not a mouse report.
    """
    if not seq.startswith('[<') or seq[-1] not in 'Mm':
        return None
    try:
        button, x, y = (int(part) for part in seq[2:-1].split(';'))
    except ValueError:
        return None

    col, row = x - 1, y - 1
    if seq[-1] == 'm':
        return MouseEvent(MouseAction.RELEASE, col, row)
    if button & 64:
        action = MouseAction.WHEEL_DOWN if button & 1 else MouseAction.WHEEL_UP
        return MouseEvent(action, col, row)
    if button & 32:
        return MouseEvent(MouseAction.MOTION, col, row)
    action = {
        0: MouseAction.LEFT_CLICK,
        1: MouseAction.MIDDLE_CLICK,
        2: MouseAction.RIGHT_CLICK,
    }.get(button & 3, MouseAction.RELEASE)
    return MouseEvent(action, col, row)


class InputReader:
    """
    Non-blocking keyboard and mouse reader.

    Uses os.read() to bypass Python's I/O buffering and properly
    handle escape sequences that may arrive split across reads.
    """

    # Escape sequence mappings (without the \x1b prefix)
    SEQUENCES: dict[str, Key] = {
        # Arrow keys (CSI)
        '[A': Key.UP,
        '[B': Key.DOWN,
        '[C': Key.RIGHT,
        '[D': Key.LEFT,
        # Arrow keys (SS3 - application mode)
        'OA': Key.UP,
        'OB': Key.DOWN,
        'OC': Key.RIGHT,
        'OD': Key.LEFT,
        # Navigation
        '[H': Key.HOME,
        '[F': Key.END,
        '[1~': Key.HOME,
        '[4~': Key.END,
        '[5~': Key.PAGE_UP,
        '[6~': Key.PAGE_DOWN,
        '[3~': Key.DELETE,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
        '\t': Key.TAB,
        '\x7f': Key.BACKSPACE,
        '\x08': Key.BACKSPACE,
        '\x03': Key.CTRL_C,
    }

    def __init__(self, fd: Optional[int] = None) -> None:
        self._buffer = ""
        self._fd = sys.stdin.fileno() if fd is None else fd

    def feed(self, text: str) -> None:
        """Append already-read input to the buffer."""
        self._buffer += text

    def read(self, timeout: float = 0.1) -> Optional[InputEvent]:
        """
        Read a single input event.

        Returns None if no input available within timeout. A mouse report
        cut short by the end of a read stays buffered until the rest
        arrives.
        """
        # Process any buffered input first
        if self._buffer and not self._incomplete_mouse_report():
            return self._process_buffer()

        if not self._has_input(timeout):
            return None

        self._read_available()

        if self._buffer and not self._incomplete_mouse_report():
            return self._process_buffer()

        return None

    def _incomplete_mouse_report(self) -> bool:
        """Check if the buffer holds only the start of an SGR mouse report."""
        if not self._buffer.startswith('\x1b[<'):
            return False
        return all(ch.isdigit() or ch == ';' for ch in self._buffer[3:])

    def _read_available(self) -> None:
        """Read all currently available input into buffer using os.read."""
        try:
            data = os.read(self._fd, 1024)
            self._buffer += data.decode('utf-8', errors='replace')
        except (OSError, BlockingIOError):
            pass

        # Lone escape or half a mouse report: wait for the rest
        if self._buffer == '\x1b' or self._incomplete_mouse_report():
            self._wait_for_escape_sequence()

    def _wait_for_escape_sequence(self) -> None:
        """Wait up to 100ms for the rest of an escape sequence."""
        deadline = time.monotonic() + 0.1

        while time.monotonic() < deadline:
            wait_time = min(deadline - time.monotonic(), 0.025)
            if wait_time <= 0:
                break

            if self._has_input(wait_time):
                try:
                    data = os.read(self._fd, 1024)
                    self._buffer += data.decode('utf-8', errors='replace')
                except (OSError, BlockingIOError):
                    pass

                rest = self._buffer[1:]
                if rest and (rest[-1].isalpha() or rest[-1] == '~'):
                    return

    def _process_buffer(self) -> Optional[InputEvent]:
        """Process buffered input and return next event."""
        if not self._buffer:
            return None

        first = self._buffer[0]

        if first in self.SIMPLE_KEYS:
            self._buffer = self._buffer[1:]
            return KeyEvent(key=self.SIMPLE_KEYS[first], raw=first)

        if first == '\x1b':
            return self._parse_escape_sequence()

        if first.isprintable():
            self._buffer = self._buffer[1:]
            return KeyEvent(char=first, raw=first)

        # Unknown control character - skip it
        self._buffer = self._buffer[1:]
        return None

    def _parse_escape_sequence(self) -> InputEvent:
        """Parse an escape sequence from the buffer."""
        rest = self._buffer[1:]

        # Find where this sequence ends
        end_idx = 0
        for i, ch in enumerate(rest):
            if ch == '\x1b':
                # Start of next escape sequence
                end_idx = i
                break
            if ch.isalpha() or ch == '~':
                # 'O' opens an SS3 sequence rather than ending one
                if i == 0 and ch == 'O':
                    continue
                end_idx = i + 1
                break
            end_idx = i + 1

        if end_idx == 0:
            self._buffer = self._buffer[1:]
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        seq = rest[:end_idx]
        self._buffer = self._buffer[1 + end_idx:]
        raw = '\x1b' + seq

        mouse = parse_sgr_mouse(seq)
        if mouse is not None:
            return mouse

        if seq in self.SEQUENCES:
            return KeyEvent(key=self.SEQUENCES[seq], raw=raw)

        # Unknown sequence
        return KeyEvent(raw=raw)

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False
