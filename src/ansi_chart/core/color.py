"""256-color palette entries and their SGR sequences."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Color:
    """
    A color from the xterm-256 palette.

    Indices 0-15 are the system colors, 16-231 the 6x6x6 cube and
    232-255 the grayscale ramp.
    """
    index: int

    BLACK: ClassVar["Color"]
    BRIGHT_BLACK: ClassVar["Color"]
    BRIGHT_RED: ClassVar["Color"]
    BRIGHT_GREEN: ClassVar["Color"]
    BRIGHT_WHITE: ClassVar["Color"]

    def __post_init__(self) -> None:
        if not 0 <= self.index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {self.index}")

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for foreground color."""
        return f"38;5;{self.index}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for background color."""
        return f"48;5;{self.index}"

    @property
    def label(self) -> str:
        """Zero-padded three digit label drawn on the swatch."""
        return f"{self.index:03d}"

    def contrast(self) -> "Color":
        """
        Pick a readable label color for text drawn on top of this color.

        Dark system colors, the darker half of every cube tier and the
        lower grayscale steps get white text; everything else gets black.
        """
        i = self.index
        if i < 8 or (16 <= i <= 231 and i % 36 < 18) or 232 <= i <= 243:
            return Color.BRIGHT_WHITE
        return Color.BLACK


Color.BLACK = Color(0)
Color.BRIGHT_BLACK = Color(8)
Color.BRIGHT_RED = Color(9)
Color.BRIGHT_GREEN = Color(10)
Color.BRIGHT_WHITE = Color(15)


def sgr(*params: str) -> str:
    """Build an SGR escape sequence from parameter strings."""
    return f"\x1b[{';'.join(params)}m"
