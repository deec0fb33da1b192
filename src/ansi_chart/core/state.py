"""The chart's whole interaction model."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ansi_chart.core.layout import ClickMap, RowMetrics


class Mode(Enum):
    """Top-level interaction state."""
    NORMAL = "normal"
    CONFIRMING_QUIT = "confirming_quit"


@dataclass(frozen=True)
class Toast:
    """A transient one-line notification shown under the chart."""
    text: str
    color: int
    generation: int
    failed: bool = False


@dataclass
class InteractionState:
    """
    Everything the chart knows between events.

    ``click_map`` and ``row_metrics`` describe the most recently rendered
    frame and are replaced wholesale on every render.
    """
    last_copied: Optional[str] = None
    click_map: ClickMap = field(default_factory=dict)
    row_metrics: tuple[RowMetrics, ...] = ()
    scroll_y: int = 0
    win_width: int = 0
    win_height: int = 0
    mode: Mode = Mode.NORMAL
    toast: Optional[Toast] = None
    toast_generation: int = 0

    @property
    def confirm_quit_pending(self) -> bool:
        return self.mode is Mode.CONFIRMING_QUIT

    @property
    def toast_shown(self) -> bool:
        return self.toast is not None
