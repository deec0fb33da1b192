"""Exception hierarchy for ansi-chart."""


class ChartError(Exception):
    """Base class for all ansi-chart errors."""


class StartupError(ChartError):
    """The terminal or event loop could not be initialized."""


class ClipboardError(ChartError):
    """Copying text to the system clipboard failed."""
