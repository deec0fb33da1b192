"""Frame composition for the terminal."""

from ansi_chart.render.frame import render_frame

__all__ = ["render_frame"]
