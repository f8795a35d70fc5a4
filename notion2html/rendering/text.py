"""
Inline formatting resolver.

Turns a sequence of formatted text runs into nested markup. Each instruction
wraps the result of the previous one, so the first instruction ends up
innermost. Styles without a markup counterpart, and every with-context
instruction (links, mentions, colors), pass the text through unchanged.
"""

from __future__ import annotations

from typing import Dict, Iterable

from tinyhtml import Frag, frag, h

from ..models.blocks import (
    FormatInstruction,
    FormattedText,
    NoContextFormat,
    StyleKind,
)

_STYLE_TAGS: Dict[StyleKind, str] = {
    StyleKind.BOLD: "b",
    StyleKind.ITALIC: "em",
}


def apply_format(inner: Frag, instruction: FormatInstruction) -> Frag:
    if isinstance(instruction, NoContextFormat):
        tag = _STYLE_TAGS.get(instruction.style)
        if tag:
            return h(tag)(inner)
    return inner


def render_run(index: int, run: FormattedText) -> Frag:
    if run.formatting is None:
        return frag(run.text)
    wrapped: Frag = frag(run.text)
    for instruction in run.formatting:
        wrapped = apply_format(wrapped, instruction)
    # data-token-index lets downstream tooling address a single run
    return h("span", **{"data-token-index": str(index)})(wrapped)


def render_text(runs: Iterable[FormattedText]) -> Frag:
    return frag(*(render_run(i, run) for i, run in enumerate(runs)))
