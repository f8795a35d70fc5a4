"""Public exports for the block table models."""

from __future__ import annotations

from .blocks import (
    BlockKind,
    BlockRecord,
    BlockTable,
    BlockValue,
    BulletedListBlock,
    FormatInstruction,
    FormattedText,
    NoContextFormat,
    NumberedListBlock,
    PageBlock,
    PageProperties,
    StyleKind,
    TextBlock,
    TextProperties,
    UnknownBlock,
    UnresolvedValue,
    WithContextFormat,
    parse_block_table,
)

__all__ = [
    "BlockKind",
    "BlockRecord",
    "BlockTable",
    "BlockValue",
    "BulletedListBlock",
    "FormatInstruction",
    "FormattedText",
    "NoContextFormat",
    "NumberedListBlock",
    "PageBlock",
    "PageProperties",
    "StyleKind",
    "TextBlock",
    "TextProperties",
    "UnknownBlock",
    "UnresolvedValue",
    "WithContextFormat",
    "parse_block_table",
]
