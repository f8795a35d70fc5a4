#!/usr/bin/env python
"""Command line interface for notion2html."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from notion2html import __version__
from notion2html.cli.commands import blocks, render

app = typer.Typer(help="Render exported Notion pages to HTML", add_completion=False)
console = Console()

app.command("render")(render.main)
app.command("blocks")(blocks.main)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"notion2html v{__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Convert Notion block table exports into HTML."""
    # Logs go to stderr so `render --stdout` output stays clean
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_time=True,
                log_time_format="%H:%M:%S",
            )
        ],
        force=True,
    )


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
