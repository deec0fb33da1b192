"""Terminal front end: typer CLI, terminal I/O and the chart event loop."""
