"""
Typed block table for page exports (recordMap["block"]).

- Block records as they appear on the wire, coerced into a closed set of
  renderable kinds with an open fallback for everything else.
- Formatted text runs with their nested style/context instructions.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import (
    ConfigDict,
    Field,
    JsonValue,
    TypeAdapter,
    field_validator,
    model_validator,
)

from ._base import NotionModel

# ---------------------------------------------------------------------------
# Inline formatting
# ---------------------------------------------------------------------------


class StyleKind(str, Enum):
    """Context-free styles; wire values are the single-letter export tags."""

    BOLD = "b"
    ITALIC = "i"
    STRIKETHROUGH = "s"
    CODE = "c"
    UNDERLINE = "_"
    OTHER = "?"

    @classmethod
    def _missing_(cls, value):
        return cls.OTHER


class NoContextFormat(NotionModel):
    kind: Literal["no_context"] = "no_context"
    style: StyleKind

    @field_validator("style", mode="before")
    @classmethod
    def _coerce_style(cls, v):
        # Unknown letters collapse to OTHER instead of failing the whole run
        return v if isinstance(v, StyleKind) else StyleKind(v)


class WithContextFormat(NotionModel):
    """Links ("a"), colors ("h"), mentions ("u", "p"), dates ("d"), ..."""

    kind: Literal["with_context"] = "with_context"
    name: str
    context: JsonValue = None


FormatInstruction = Annotated[
    Union[NoContextFormat, WithContextFormat],
    Field(discriminator="kind"),
]


def _coerce_format(obj: Any) -> Any:
    """Map the wire shapes ["b"] / ["a", "https://..."] to tagged dicts."""
    if isinstance(obj, (NoContextFormat, WithContextFormat)):
        return obj
    if isinstance(obj, (list, tuple)):
        if not obj:
            return {"kind": "no_context", "style": StyleKind.OTHER}
        if len(obj) == 1:
            return {"kind": "no_context", "style": obj[0]}
        return {"kind": "with_context", "name": str(obj[0]), "context": obj[1]}
    if isinstance(obj, dict) and "kind" not in obj:
        if "style" in obj:
            return {"kind": "no_context", **obj}
        return {"kind": "with_context", **obj}
    return obj


class FormattedText(NotionModel):
    text: str
    formatting: Optional[List[FormatInstruction]] = None

    @model_validator(mode="before")
    @classmethod
    def _from_wire(cls, obj):
        # Wire shape: ["text"] or ["text", [["b"], ["a", "url"]]]
        if isinstance(obj, (list, tuple)):
            obj = {
                "text": obj[0] if obj else "",
                "formatting": obj[1] if len(obj) > 1 else None,
            }
        if isinstance(obj, dict) and obj.get("formatting") is not None:
            obj = {**obj, "formatting": [_coerce_format(f) for f in obj["formatting"]]}
        return obj


def plain_text(runs: List[FormattedText]) -> str:
    return "".join(run.text for run in runs)


class TextProperties(NotionModel):
    title: List[FormattedText] = Field(default_factory=list)

    @property
    def plain_text(self) -> str:
        return plain_text(self.title)


class PageProperties(NotionModel):
    title: List[FormattedText] = Field(default_factory=list)

    @property
    def plain_text(self) -> str:
        return plain_text(self.title)


# ---------------------------------------------------------------------------
# Block kinds
# ---------------------------------------------------------------------------


class PageBlock(NotionModel):
    type: Literal["page"]
    properties: PageProperties = Field(default_factory=PageProperties)
    format: Optional[JsonValue] = None
    file_ids: Optional[List[str]] = None


class TextBlock(NotionModel):
    type: Literal["text"]
    properties: Optional[TextProperties] = None


class BulletedListBlock(NotionModel):
    type: Literal["bulleted_list"]
    properties: Optional[TextProperties] = None


class NumberedListBlock(NotionModel):
    # Carries no properties yet; whatever the export sends is dropped.
    model_config = ConfigDict(extra="ignore", frozen=True)

    type: Literal["numbered_list"]


class UnknownBlock(NotionModel):
    """Any kind without a dedicated model (header, toggle, image, ...)."""

    model_config = ConfigDict(extra="allow", frozen=True)

    type: str


# One source of truth for kinds that get a dedicated model.
KNOWN_BLOCK_TYPES: frozenset[str] = frozenset(
    {"page", "text", "bulleted_list", "numbered_list"}
)

KnownBlock = Annotated[
    Union[PageBlock, TextBlock, BulletedListBlock, NumberedListBlock],
    Field(discriminator="type"),
]

BlockKind = Union[KnownBlock, UnknownBlock]

_KNOWN_BLOCK = TypeAdapter(KnownBlock)

_BLOCK_MODELS = (PageBlock, TextBlock, BulletedListBlock, NumberedListBlock, UnknownBlock)

_KIND_MODELS: Dict[str, type[NotionModel]] = {
    "page": PageBlock,
    "text": TextBlock,
    "bulleted_list": BulletedListBlock,
    "numbered_list": NumberedListBlock,
}


def _dispatch_block(obj: Any) -> Any:
    if isinstance(obj, _BLOCK_MODELS):
        return obj
    t = obj.get("type") if isinstance(obj, dict) else None
    if t in KNOWN_BLOCK_TYPES:
        return _KNOWN_BLOCK.validate_python(obj)
    if isinstance(t, str) and t:
        return UnknownBlock(**obj)
    raise ValueError("block value has no 'type' tag")


# ---------------------------------------------------------------------------
# Records and table
# ---------------------------------------------------------------------------

# Keys that belong to the value envelope rather than to the block kind.
_VALUE_KEYS = ("id", "content", "parent_id")


def _split_kind(obj: Dict[str, Any]) -> tuple[Dict[str, Any], Dict[str, Any]]:
    """Split a flat wire value into (envelope, kind) dicts.

    A modeled kind only receives the fields its model declares; bookkeeping
    such as version, alive or created_time stays on the envelope. Unmodeled
    kinds receive everything that is not envelope.
    """
    model = _KIND_MODELS.get(obj.get("type"))
    if model is None:
        kind_keys = {k for k in obj if k not in _VALUE_KEYS}
    else:
        kind_keys = {k for k in obj if k in model.model_fields}
    envelope = {k: v for k, v in obj.items() if k not in kind_keys}
    kind = {k: v for k, v in obj.items() if k in kind_keys}
    return envelope, kind


class BlockValue(NotionModel):
    # The envelope carries export bookkeeping that is never rendered.
    model_config = ConfigDict(extra="allow", frozen=True)

    id: str
    block: BlockKind
    content: Optional[List[str]] = None
    parent_id: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _fold_kind(cls, obj):
        """
        The export stores the kind fields flat next to id/content:
            {"id": ..., "type": "text", "properties": {...}, "content": [...]}
        Fold the kind fields into `block` and dispatch it.
        """
        if not isinstance(obj, dict):
            return obj
        if "block" not in obj:
            envelope, kind = _split_kind(obj)
            obj = {**envelope, "block": kind}
        return {**obj, "block": _dispatch_block(obj["block"])}


class UnresolvedValue(NotionModel):
    """A record that is referenced by id but has nothing to render."""

    model_config = ConfigDict(extra="allow", frozen=True)

    id: Optional[str] = None


class BlockRecord(NotionModel):
    role: Optional[str] = None
    value: Optional[Union[BlockValue, UnresolvedValue]] = Field(
        default=None, union_mode="left_to_right"
    )

    @model_validator(mode="before")
    @classmethod
    def _unwrap_nested(cls, obj):
        # Newer exports nest the record once more: {"value": {"value": {...}, "role": ...}}
        if isinstance(obj, dict):
            inner = obj.get("value")
            if isinstance(inner, dict) and isinstance(inner.get("value"), dict):
                return {"role": inner.get("role", obj.get("role")), "value": inner["value"]}
        return obj

    @property
    def resolved(self) -> Optional[BlockValue]:
        return self.value if isinstance(self.value, BlockValue) else None


BlockTable = Dict[str, BlockRecord]

_BLOCK_TABLE = TypeAdapter(BlockTable)


def parse_block_table(data: Any) -> BlockTable:
    """Validate a raw export mapping into a BlockTable.

    Accepts a full page chunk ({"recordMap": {"block": {...}}}), a record map
    ({"block": {...}}) or a bare identifier -> record mapping.

    Raises pydantic.ValidationError when the mapping itself is malformed.
    Individual records that are not renderable blocks do not raise; they
    become UnresolvedValue records.
    """
    if isinstance(data, dict) and isinstance(data.get("recordMap"), dict):
        data = data["recordMap"]
    if isinstance(data, dict) and isinstance(data.get("block"), dict):
        data = data["block"]
    return _BLOCK_TABLE.validate_python(data)


__all__ = [
    "StyleKind",
    "NoContextFormat",
    "WithContextFormat",
    "FormatInstruction",
    "FormattedText",
    "TextProperties",
    "PageProperties",
    "PageBlock",
    "TextBlock",
    "BulletedListBlock",
    "NumberedListBlock",
    "UnknownBlock",
    "KNOWN_BLOCK_TYPES",
    "BlockKind",
    "BlockValue",
    "UnresolvedValue",
    "BlockRecord",
    "BlockTable",
    "parse_block_table",
    "plain_text",
]
