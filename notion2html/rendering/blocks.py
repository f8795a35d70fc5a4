"""
Kind-based block skeleton rendering.

A small, pure dispatcher that maps one block's structural kind to its own
markup. It never recurses into children; the tree walker in `renderer`
handles those. Kinds without a renderer get a visible placeholder heading so
a reader can tell "something is here" apart from "nothing is here".

Design:
  - Renderers: small classes implementing `render(block)`
  - Dispatcher: exact model class map, then placeholder fallback
"""

from __future__ import annotations

from typing import Optional

from tinyhtml import Frag, h

from ..models.blocks import (
    BlockKind,
    BulletedListBlock,
    PageBlock,
    TextBlock,
    TextProperties,
)
from .text import render_text

PLACEHOLDER_TEXT = "Could not render!"


def _with_title(tag: str, css_class: str, properties: Optional[TextProperties]) -> Frag:
    el = h(tag, **{"class": css_class})
    if properties is None:
        return el()
    return el(render_text(properties.title))


class _Renderer:
    def render(self, block: BlockKind) -> Frag:  # pragma: no cover - interface
        raise NotImplementedError


class _PageRenderer(_Renderer):
    def render(self, block: PageBlock) -> Frag:
        return h("h1", **{"class": "notion-page-block"})(
            render_text(block.properties.title)
        )


class _TextRenderer(_Renderer):
    def render(self, block: TextBlock) -> Frag:
        return _with_title("p", "notion-text-block", block.properties)


class _BulletedListRenderer(_Renderer):
    # Only the item itself; the enclosing list comes from the group wrapper.
    def render(self, block: BulletedListBlock) -> Frag:
        return _with_title("li", "notion-bulleted_list-block", block.properties)


class _PlaceholderRenderer(_Renderer):
    def render(self, block: BlockKind) -> Frag:
        return h("h1")(PLACEHOLDER_TEXT)


# Singletons
_PAGE = _PageRenderer()
_TEXT = _TextRenderer()
_BULLETED = _BulletedListRenderer()
_PLACEHOLDER = _PlaceholderRenderer()


# Exact model mappings, keyed by class so an UnknownBlock never reaches a
# renderer that expects typed properties. NumberedListBlock has no item
# renderer yet and falls through to the placeholder like any unmodeled kind.
_EXACT: dict[type, _Renderer] = {
    PageBlock: _PAGE,
    TextBlock: _TEXT,
    BulletedListBlock: _BULLETED,
}


def render_block(block: BlockKind) -> Frag:
    return _EXACT.get(type(block), _PLACEHOLDER).render(block)
