"""Blocks command for the notion2html CLI."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from notion2html.exceptions import Notion2HtmlError
from notion2html.rendering.exporter import load_block_table

console = Console()


def main(
    export: Path = typer.Argument(
        ...,
        help="Exported JSON file",
        exists=True,
        dir_okay=False,
    ),
):
    """List the blocks of an export, to help pick a --root."""
    try:
        table = load_block_table(str(export))
    except Notion2HtmlError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if not table:
        console.print("No blocks found")
        return

    out = Table("ID", "Kind", "Children", "Resolved")
    for block_id, record in table.items():
        value = record.resolved
        if value is None:
            out.add_row(block_id, "-", "-", "no")
            continue
        children = "-" if value.content is None else str(len(value.content))
        out.add_row(block_id, value.block.type, children, "yes")

    console.print(out)
