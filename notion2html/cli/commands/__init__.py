"""Command modules for the notion2html CLI."""

# Import all command modules here for easy access
from notion2html.cli.commands import blocks, render

__all__ = ["blocks", "render"]
