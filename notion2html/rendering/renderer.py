"""
Pure renderer for exported block tables.

Resolves a block identifier against a BlockTable and renders it, and all of
its descendants, into an HTML fragment. No I/O.

Rendering never raises: missing or non-renderable records become empty
markup, unmodeled kinds become a placeholder heading, and a failure inside
any descendant is logged and replaced by empty markup at the call site.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from tinyhtml import Frag, frag, h

from ..models.blocks import BlockKind, BlockTable, BlockValue
from .blocks import render_block
from .options import DEFAULT_CONFIG, RenderConfig

LOGGER = logging.getLogger(__name__)

# List item kinds whose consecutive siblings share one enclosing list.
GROUPABLE_TYPES: frozenset[str] = frozenset({"bulleted_list", "numbered_list"})

# Identifiers currently being rendered, outermost first.
Path = Tuple[str, ...]


def needs_grouping(block: BlockKind) -> bool:
    return block.type in GROUPABLE_TYPES


def can_be_grouped(block: BlockKind, group: Sequence[BlockValue]) -> bool:
    # bulleted only with bulleted, numbered only with numbered
    return bool(group) and group[0].block.type == block.type


def _resolve(block_id: str, table: BlockTable) -> Optional[BlockValue]:
    record = table.get(block_id)
    if record is None:
        LOGGER.debug("render.missing id=%s", block_id)
        return None
    value = record.resolved
    if value is None:
        LOGGER.debug("render.unresolved id=%s role=%s", block_id, record.role)
    return value


def _render(
    block_id: str, table: BlockTable, config: RenderConfig, path: Path
) -> Frag:
    value = _resolve(block_id, table)
    if value is None:
        return frag()
    if config.detect_cycles and block_id in path:
        LOGGER.warning("render.cycle id=%s depth=%d", block_id, len(path))
        return frag()
    if config.depth_exceeded(len(path) + 1):
        LOGGER.warning(
            "render.depth_exceeded id=%s max_depth=%d", block_id, config.max_depth
        )
        return frag()

    if config.debug:
        LOGGER.debug(
            "render.dispatch id=%s type=%s children=%s",
            block_id,
            value.block.type,
            None if value.content is None else len(value.content),
        )
    own = render_block(value.block)
    if value.content is None:
        return own

    try:
        children = _render_children(value.content, table, config, path + (block_id,))
    except Exception:
        LOGGER.warning("render.children_failed id=%s", block_id, exc_info=True)
        return own
    return frag(own, children)


def _safe_render(
    block_id: str, table: BlockTable, config: RenderConfig, path: Path
) -> Frag:
    try:
        return _render(block_id, table, config, path)
    except Exception:
        LOGGER.warning("render.descendant_failed id=%s", block_id, exc_info=True)
        return frag()


def _render_wrapper(
    group: Sequence[BlockValue], table: BlockTable, config: RenderConfig, path: Path
) -> Frag:
    if not group:
        return frag()
    if not needs_grouping(group[0].block):
        return frag()
    return h("ul")(*(_safe_render(member.id, table, config, path) for member in group))


@dataclass
class _SiblingAccumulator:
    """Fold state for one ordered sequence of siblings.

    Two states: no pending group (`pending` is empty), or a pending group of
    list items whose kind is that of `pending[0]`. A pending group is wrapped
    once, when a non-list sibling, a list item of the other family, or the
    end of the sequence arrives.
    """

    table: BlockTable
    config: RenderConfig
    path: Path
    emitted: List[Frag] = field(default_factory=list)
    pending: List[BlockValue] = field(default_factory=list)

    def feed(self, block_id: str) -> None:
        value = _resolve(block_id, self.table)
        if value is None:
            # Contributes nothing and leaves an open group open.
            return
        if needs_grouping(value.block):
            if not can_be_grouped(value.block, self.pending):
                self.flush()
            self.pending.append(value)
            return
        self.flush()
        self.emitted.append(_safe_render(block_id, self.table, self.config, self.path))

    def flush(self) -> None:
        if not self.pending:
            return
        if self.config.debug:
            LOGGER.debug(
                "render.group_flush type=%s size=%d",
                self.pending[0].block.type,
                len(self.pending),
            )
        self.emitted.append(
            _render_wrapper(self.pending, self.table, self.config, self.path)
        )
        self.pending = []

    def result(self) -> Frag:
        self.flush()
        return h("div")(*self.emitted)


def _render_children(
    ids: Iterable[str], table: BlockTable, config: RenderConfig, path: Path
) -> Frag:
    acc = _SiblingAccumulator(table=table, config=config, path=path)
    for block_id in ids:
        acc.feed(block_id)
    return acc.result()


# ----------------------------- Public API ------------------------------------


def render(
    block_id: str, table: BlockTable, config: Optional[RenderConfig] = None
) -> Frag:
    """Render one block and its descendants. Always returns a fragment."""
    return _safe_render(block_id, table, config or DEFAULT_CONFIG, ())


def render_children(
    ids: Iterable[str], table: BlockTable, config: Optional[RenderConfig] = None
) -> Frag:
    """Render an ordered sibling sequence inside one <div>, grouping list runs."""
    conf = config or DEFAULT_CONFIG
    try:
        return _render_children(ids, table, conf, ())
    except Exception:
        LOGGER.warning("render.children_failed", exc_info=True)
        return h("div")()


def render_wrapper(
    group: Sequence[BlockValue],
    table: BlockTable,
    config: Optional[RenderConfig] = None,
) -> Frag:
    """Render a run of same-kind list items as a single <ul>."""
    return _render_wrapper(group, table, config or DEFAULT_CONFIG, ())


def render_page(title: str, html_fragment: str, extra_css: str = "") -> str:
    return (
        '<!doctype html><meta charset="utf-8">'
        '<meta name="color-scheme" content="light dark">'
        f"<title>{html.escape(title)}</title>"
        "<style>"
        "body{font-family:-apple-system,BlinkMacSystemFont,Segoe UI,Roboto,Helvetica,Arial,sans-serif;"
        "line-height:1.5;max-width:46em;margin:2em auto;padding:0 1em;background:#fff;color:#37352f}"
        "h1.notion-page-block{font-size:2em;margin:.2em 0 .6em}"
        "p.notion-text-block{margin:.3em 0;min-height:1em}"
        "ul{margin:.2em 0;padding-left:1.6em}"
        "@media (prefers-color-scheme: dark){"
        "body{background:#191919;color:#e6e6e6}"
        "}"
        f'{extra_css}</style><div class="notion-content">{html_fragment}</div>'
    )


class BlockRenderer:
    """Class-based interface for block tree rendering."""

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()

    def render_fragment(self, block_id: str, table: BlockTable) -> Frag:
        return render(block_id, table, config=self.config)

    def render(self, block_id: str, table: BlockTable) -> str:
        """Render a block and its descendants to an HTML fragment string."""
        return self.render_fragment(block_id, table).render()

    def render_full_page(self, title: str, html_fragment: str) -> str:
        """Wrap an HTML fragment in a full page with CSS."""
        return render_page(title, html_fragment)
