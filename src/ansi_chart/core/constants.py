"""Shared constants for the color chart."""

from dataclasses import dataclass

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"
CLEAR_EOL = f"{CSI}K"
CLEAR_EOS = f"{CSI}J"

# Palette sections
SYSTEM_ROWS = 2
SYSTEM_COLS = 8
CUBE_TIERS = 3
CUBE_ROWS = 6
CUBE_COLS = 12
GRAY_ROWS = 2
GRAY_COLS = 12
SECTION_GAP_ROWS = 1

TOTAL_ROWS = (
    SYSTEM_ROWS
    + SECTION_GAP_ROWS
    + CUBE_TIERS * CUBE_ROWS
    + SECTION_GAP_ROWS
    + GRAY_ROWS
)

# Layout
DEFAULT_TILE_WIDTH = 5  # Used when the terminal width is unknown (<= 0)
TILE_HEIGHT = 3
TITLE_LINES = 2         # Title + blank line
FOOTER_LINES = 1

# Interaction
SCROLL_STEP = 3
TOAST_SECONDS = 2.0


@dataclass(frozen=True)
class Settings:
    """Runtime tunables, filled from the command line."""
    scroll_step: int = SCROLL_STEP
    toast_seconds: float = TOAST_SECONDS


DEFAULT_SETTINGS = Settings()
