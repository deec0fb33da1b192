"""Interactive applications."""

from ansi_chart.cli.studio.chart import ChartApp, run_chart

__all__ = ["ChartApp", "run_chart"]
