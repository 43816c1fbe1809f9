#!/usr/bin/env python3
"""
hoopreplay CLI - play-by-play transcript replay

Main entrypoint for the hoopreplay command-line tool.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from hoopreplay.logging_config import setup_logging
from cli.commands import parse, replay

app = typer.Typer(
    name="hoopreplay",
    help="Basketball play-by-play parsing and deterministic replay",
    add_completion=False,
)

console = Console()

app.command(name="parse")(parse.parse_command)
app.command(name="replay")(replay.replay_command)


@app.callback()
def configure(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ERROR"),
    log_format: Optional[str] = typer.Option(None, "--log-format", help="json or text"),
):
    """Configure logging before any command runs."""
    setup_logging(level=log_level, log_format=log_format)


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from hoopreplay import __version__ as engine_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]hoopreplay CLI[/bold]", f"v{__version__}")
    table.add_row("Engine", f"v{engine_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
