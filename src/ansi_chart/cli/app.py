"""Typer CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from ansi_chart.core.constants import SCROLL_STEP, TOAST_SECONDS, Settings
from ansi_chart.errors import StartupError


def _version_callback(value: bool) -> None:
    if value:
        from ansi_chart import __version__
        typer.echo(f"ansi-chart {__version__}")
        raise typer.Exit()


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ansi-chart",
        help="Interactive xterm-256 color chart. Click a swatch to copy its number.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    err_console = Console(stderr=True)

    @app.command()
    def chart(
        scroll_step: Annotated[int, typer.Option("--scroll-step", min=1, help="Lines scrolled per wheel step")] = SCROLL_STEP,
        toast_seconds: Annotated[float, typer.Option("--toast-seconds", min=0.1, help="How long the copy notice stays up")] = TOAST_SECONDS,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Write debug log to this file")] = None,
        version: Annotated[bool, typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit")] = False,
    ) -> None:
        """Show the color chart."""
        from ansi_chart.cli.studio.chart import run_chart

        if log_file is not None:
            logging.basicConfig(
                filename=log_file,
                level=logging.DEBUG,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            )

        settings = Settings(scroll_step=scroll_step, toast_seconds=toast_seconds)
        try:
            run_chart(settings)
        except StartupError as e:
            err_console.print(f"[red]Error:[/] {e}")
            raise typer.Exit(1)

    return app
