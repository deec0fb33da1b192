"""Interaction controller - turns events into a new state plus commands.

``update`` never performs side effects itself. It returns the commands
the caller must carry out:

- Quit:          leave the event loop (exit status 0)
- CopyText:      put text on the system clipboard
- ScheduleTimer: deliver ``event`` back to ``update`` after ``delay`` seconds

Key bindings:
    Normal:
        q / Ctrl+C: quit immediately
        g: ask for confirmation before quitting
    Confirming quit:
        y / Y / Enter: quit
        n / N / Esc: back to normal
        anything else: handled as in normal mode
    Any state:
        left click: copy the color under the pointer
        wheel: scroll
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Union

from ansi_chart.core.color import Color
from ansi_chart.core.constants import DEFAULT_SETTINGS, Settings
from ansi_chart.core.events import (
    CopyFailedEvent,
    Event,
    KeyEvent,
    MouseAction,
    MouseEvent,
    ResizeEvent,
    TimerEvent,
)
from ansi_chart.core.hit_test import resolve_click
from ansi_chart.core.state import InteractionState, Mode, Toast
from ansi_chart.core import viewport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quit:
    """Terminate the program cleanly."""


@dataclass(frozen=True)
class CopyText:
    """Copy ``text`` to the clipboard on behalf of toast ``generation``."""
    text: str
    color_id: int
    generation: int


@dataclass(frozen=True)
class ScheduleTimer:
    """Deliver ``event`` after ``delay`` seconds."""
    delay: float
    event: TimerEvent


Command = Union[Quit, CopyText, ScheduleTimer]

CONFIRM_KEYS = frozenset({"y", "Y", "enter"})
CANCEL_KEYS = frozenset({"n", "N", "esc"})
QUIT_KEYS = frozenset({"q", "ctrl+c"})
CONFIRM_QUIT_KEY = "g"


def update(
    state: InteractionState,
    event: Event,
    settings: Settings = DEFAULT_SETTINGS,
) -> tuple[InteractionState, list[Command]]:
    """Apply one event. Returns the new state and commands to run."""
    if isinstance(event, KeyEvent):
        return _handle_key(state, event)
    if isinstance(event, ResizeEvent):
        return replace(state, win_width=event.width, win_height=event.height), []
    if isinstance(event, MouseEvent):
        return _handle_mouse(state, event, settings)
    if isinstance(event, TimerEvent):
        return _handle_toast_expiry(state, event), []
    if isinstance(event, CopyFailedEvent):
        return _handle_copy_failed(state, event), []
    return state, []


def _handle_key(state: InteractionState, event: KeyEvent) -> tuple[InteractionState, list[Command]]:
    name = event.name

    if state.mode is Mode.CONFIRMING_QUIT:
        if name in CONFIRM_KEYS:
            return state, [Quit()]
        if name in CANCEL_KEYS:
            return replace(state, mode=Mode.NORMAL), []

    if name in QUIT_KEYS:
        return state, [Quit()]
    if name == CONFIRM_QUIT_KEY:
        return replace(state, mode=Mode.CONFIRMING_QUIT), []
    return state, []


def _handle_mouse(
    state: InteractionState,
    event: MouseEvent,
    settings: Settings,
) -> tuple[InteractionState, list[Command]]:
    if event.action is MouseAction.LEFT_CLICK:
        return _handle_click(state, event, settings)
    if event.action is MouseAction.WHEEL_UP:
        return _scroll(state, -settings.scroll_step), []
    if event.action is MouseAction.WHEEL_DOWN:
        return _scroll(state, settings.scroll_step), []
    return state, []


def _handle_click(
    state: InteractionState,
    event: MouseEvent,
    settings: Settings,
) -> tuple[InteractionState, list[Command]]:
    if not state.row_metrics:
        return state, []
    # Lines under the viewport show the toast, confirmation and footer.
    if state.win_height > 0 and not 0 <= event.y < _visible(state):
        return state, []

    hit = resolve_click(event.x, event.y, state.scroll_y, state.row_metrics, state.click_map)
    if hit is None:
        return state, []

    text = str(hit.color_id)
    generation = state.toast_generation + 1
    toast = Toast(
        text=f"Copied ANSI {text} to clipboard",
        color=hit.color_id,
        generation=generation,
    )
    logger.debug("Hit row %d col %d -> color %d", hit.row, hit.col, hit.color_id)

    new_state = replace(
        state,
        last_copied=text,
        toast=toast,
        toast_generation=generation,
    )
    return new_state, [
        CopyText(text, hit.color_id, generation),
        ScheduleTimer(settings.toast_seconds, TimerEvent(generation)),
    ]


def _visible(state: InteractionState) -> int:
    return viewport.visible_height(
        state.win_height,
        toast_shown=state.toast_shown,
        confirm_shown=state.confirm_quit_pending,
    )


def _scroll(state: InteractionState, delta: int) -> InteractionState:
    scroll_y = viewport.scroll_by(state.scroll_y, delta, viewport.content_height(), _visible(state))
    return replace(state, scroll_y=scroll_y)


def _handle_toast_expiry(state: InteractionState, event: TimerEvent) -> InteractionState:
    # A newer click re-armed the toast; its own timer will clear it.
    if event.generation != state.toast_generation:
        return state
    return replace(state, toast=None)


def _handle_copy_failed(state: InteractionState, event: CopyFailedEvent) -> InteractionState:
    if state.toast is None or event.generation != state.toast_generation:
        return state
    message = f"Could not copy ANSI {event.color_id}"
    if event.reason:
        message += f": {event.reason}"
    toast = Toast(
        text=message,
        color=Color.BRIGHT_RED.index,
        generation=event.generation,
        failed=True,
    )
    return replace(state, toast=toast)
