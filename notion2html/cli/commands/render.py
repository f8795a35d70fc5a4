"""Render command for the notion2html CLI."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from notion2html.exceptions import Notion2HtmlError
from notion2html.rendering.exporter import (
    export_page,
    find_root_id,
    load_block_table,
    page_title,
)
from notion2html.rendering.options import RenderConfig
from notion2html.rendering.renderer import BlockRenderer, render_page

console = Console(stderr=True)

logger = logging.getLogger(__name__)


def main(
    export: Path = typer.Argument(
        ...,
        help="Exported JSON file (page chunk, record map or bare block map)",
        exists=True,
        dir_okay=False,
    ),
    root: Optional[str] = typer.Option(
        None,
        "--root",
        "-r",
        help="Identifier of the block to render (default: the top-level page)",
    ),
    output_dir: Path = typer.Option(
        Path("notion_html"),
        "--output-dir",
        "-o",
        help="Directory to write the rendered HTML file to",
    ),
    full_page: bool = typer.Option(
        False,
        "--full-page",
        help="Wrap output in a full HTML page (title, base styles)",
    ),
    stdout: bool = typer.Option(
        False,
        "--stdout",
        help="Print the HTML instead of writing a file",
    ),
    max_depth: int = typer.Option(
        RenderConfig.max_depth,
        "--max-depth",
        min=1,
        help="Nesting depth past which blocks render as empty markup",
    ),
):
    """Render one page (or any block) of an export to HTML."""
    try:
        table = load_block_table(str(export))
    except Notion2HtmlError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    block_id = root or find_root_id(table)
    if not block_id:
        console.print(
            "[bold red]Error:[/bold red] No top-level page found; pass --root"
        )
        raise typer.Exit(1)

    config = RenderConfig(
        max_depth=max_depth,
        debug=logging.getLogger("notion2html").isEnabledFor(logging.DEBUG),
    )
    logger.debug("Rendering %s from %s", block_id, export)

    if stdout:
        record = table.get(block_id)
        if record is None or record.resolved is None:
            console.print(f"[bold red]Error:[/bold red] Block not found: {block_id}")
            raise typer.Exit(1)
        fragment = BlockRenderer(config).render(block_id, table)
        if full_page:
            fragment = render_page(page_title(table, block_id), fragment)
        typer.echo(fragment)
        return

    try:
        path = export_page(
            table, block_id, str(output_dir), full_page=full_page, config=config
        )
    except Notion2HtmlError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)
    console.print(f"[green]Success:[/green] {path}")
