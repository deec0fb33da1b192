"""Input events delivered to the interaction controller.

The event source produces one of:

- KeyEvent:    a key press (named key or printable character)
- MouseEvent:  a click, release or wheel step at a screen cell
- ResizeEvent: the terminal changed size
- TimerEvent:  a scheduled toast expiry came due

CopyFailedEvent is not produced by the terminal; the app feeds it back
when the clipboard rejects a copy requested by the controller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    CTRL_C = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""  # Raw escape sequence

    @property
    def name(self) -> str:
        """Key name in the form used by bindings: 'q', 'enter', 'ctrl+c'."""
        if self.key is Key.CTRL_C:
            return "ctrl+c"
        if self.key is Key.ESCAPE:
            return "esc"
        if self.key is not None:
            return self.key.name.lower().replace("_", "")
        return self.char or ""


class MouseAction(Enum):
    """What the mouse did."""
    LEFT_CLICK = auto()
    RIGHT_CLICK = auto()
    MIDDLE_CLICK = auto()
    RELEASE = auto()
    WHEEL_UP = auto()
    WHEEL_DOWN = auto()
    MOTION = auto()


@dataclass(frozen=True)
class MouseEvent:
    """A mouse report at a 0-based screen cell."""
    action: MouseAction
    x: int
    y: int


@dataclass(frozen=True)
class ResizeEvent:
    """Terminal size in cells."""
    width: int
    height: int


@dataclass(frozen=True)
class TimerEvent:
    """Toast expiry for the toast armed with ``generation``."""
    generation: int


@dataclass(frozen=True)
class CopyFailedEvent:
    """The clipboard refused a copy requested for ``generation``."""
    color_id: int
    generation: int
    reason: str = ""


Event = Union[KeyEvent, MouseEvent, ResizeEvent, TimerEvent, CopyFailedEvent]
