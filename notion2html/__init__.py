"""Render exported Notion block tables to HTML."""

from notion2html.models import BlockTable, parse_block_table
from notion2html.rendering.options import RenderConfig
from notion2html.rendering.renderer import BlockRenderer, render

__version__ = "0.1.0"

__all__ = [
    "BlockRenderer",
    "BlockTable",
    "RenderConfig",
    "parse_block_table",
    "render",
]
