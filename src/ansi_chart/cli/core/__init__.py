"""Core TUI infrastructure - terminal I/O and input decoding."""

from ansi_chart.cli.core.terminal import Terminal, TerminalSize
from ansi_chart.cli.core.input import InputReader, parse_sgr_mouse

__all__ = [
    "Terminal",
    "TerminalSize",
    "InputReader",
    "parse_sgr_mouse",
]
