"""
Exporter helpers for block table exports → HTML.

These functions are thin, testable wrappers around loading, rendering, and
file I/O. They are pure apart from the file reads and writes they are named
after, and are what the CLI and higher-level callers build on.
"""

from __future__ import annotations

import json
import logging
import os
import re
from typing import Optional

from pydantic import ValidationError

from ..exceptions import BlockNotFound, ExportLoadError
from ..models.blocks import BlockTable, PageBlock, parse_block_table
from .options import RenderConfig
from .renderer import BlockRenderer, render_page

LOGGER = logging.getLogger(__name__)


def load_block_table(path: str) -> BlockTable:
    """Read a JSON export from ``path`` and validate it into a BlockTable."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ExportLoadError(f"Cannot read export {path}: {e}") from e
    try:
        table = parse_block_table(data)
    except ValidationError as e:
        raise ExportLoadError(f"Export {path} is not a block table: {e}") from e
    resolved = sum(1 for rec in table.values() if rec.resolved is not None)
    LOGGER.debug(
        "export.loaded path=%s records=%d resolved=%d", path, len(table), resolved
    )
    return table


def find_root_id(table: BlockTable) -> Optional[str]:
    """Return the first page block whose parent is not a block in the table.

    Best-effort default for callers that were not told which page to render.
    """
    for block_id, record in table.items():
        value = record.resolved
        if value is None or not isinstance(value.block, PageBlock):
            continue
        if value.parent_id not in table:
            return block_id
    return None


def page_title(table: BlockTable, block_id: str) -> str:
    record = table.get(block_id)
    value = record.resolved if record is not None else None
    if value is not None and isinstance(value.block, PageBlock):
        title = value.block.properties.plain_text.strip()
        if title:
            return title
    return "untitled"


_WHITESPACE = re.compile(r"\s+")
_UNSAFE_CHARS = re.compile(r"[^\w\- ]+")

# Page titles can be arbitrarily long; file names should not be.
_STEM_LIMIT = 60


def _file_stem(title: Optional[str]) -> str:
    """Page title -> file name stem (path separators and punctuation become '-')."""
    collapsed = _WHITESPACE.sub(" ", title or "").strip()
    stem = _UNSAFE_CHARS.sub("-", collapsed)[:_STEM_LIMIT]
    return stem or "untitled"


def write_html(
    title: str,
    html_fragment: str,
    out_dir: str,
    *,
    full_page: bool = False,
    filename: Optional[str] = None,
) -> str:
    """Write a rendered page under ``out_dir`` and return the file path.

    The file is named after the page title unless ``filename`` is given. With
    ``full_page`` the fragment is wrapped in a standalone document first.
    """
    document = render_page(title, html_fragment) if full_page else html_fragment
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, filename or _file_stem(title) + ".html")
    with open(path, "w", encoding="utf-8") as f:
        f.write(document)
    LOGGER.debug("export.file path=%s full_page=%s", path, full_page)
    return path


def export_page(
    table: BlockTable,
    block_id: str,
    out_dir: str,
    *,
    full_page: bool = False,
    config: Optional[RenderConfig] = None,
) -> str:
    """Render ``block_id`` and write it to ``out_dir``. Returns the file path.

    Unlike `render`, this refuses a root that has nothing to render, since
    writing an empty file is never what the caller asked for.
    """
    record = table.get(block_id)
    if record is None or record.resolved is None:
        raise BlockNotFound(f"Block not found: {block_id}")
    title = page_title(table, block_id)
    fragment = BlockRenderer(config).render(block_id, table)
    path = write_html(title, fragment, out_dir, full_page=full_page)
    LOGGER.info("export.written id=%s path=%s bytes=%d", block_id, path, len(fragment))
    return path
