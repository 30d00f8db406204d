"""Rich-text document trees as produced by the web editor (JSON shape)."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NodeType(str, Enum):
    DOC = "doc"
    PARAGRAPH = "paragraph"
    BULLET_LIST = "bulletList"
    LIST_ITEM = "listItem"
    TEXT = "text"


class MarkType(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"


class Mark(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str


class RichTextNode(BaseModel):
    """One node of an editor document.

    ``type`` is one of :class:`NodeType`; ``text`` and ``marks`` are only
    meaningful on text nodes, ``content`` only on container nodes.
    """

    model_config = ConfigDict(extra="ignore")

    type: str
    content: list[RichTextNode] = Field(default_factory=list)
    text: str | None = None
    marks: list[Mark] = Field(default_factory=list)

    @field_validator("content", "marks", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    def has_mark(self, mark: MarkType) -> bool:
        return any(m.type == mark.value for m in self.marks)

    def plain_text(self) -> str:
        """Concatenated text of all text leaves, without formatting."""
        if self.type == NodeType.TEXT.value:
            return self.text or ""
        return "".join(child.plain_text() for child in self.content)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def text(value: str, *, bold: bool = False, italic: bool = False) -> RichTextNode:
    marks = []
    if bold:
        marks.append(Mark(type=MarkType.BOLD.value))
    if italic:
        marks.append(Mark(type=MarkType.ITALIC.value))
    return RichTextNode(type=NodeType.TEXT.value, text=value, marks=marks)


def paragraph(*children: RichTextNode | str) -> RichTextNode:
    nodes = [text(c) if isinstance(c, str) else c for c in children]
    return RichTextNode(type=NodeType.PARAGRAPH.value, content=nodes)


def list_item(*children: RichTextNode | str) -> RichTextNode:
    nodes = [paragraph(c) if isinstance(c, str) else c for c in children]
    return RichTextNode(type=NodeType.LIST_ITEM.value, content=nodes)


def bullet_list(*items: RichTextNode | str) -> RichTextNode:
    nodes = [list_item(i) if isinstance(i, str) else i for i in items]
    return RichTextNode(type=NodeType.BULLET_LIST.value, content=nodes)


def doc(*children: RichTextNode) -> RichTextNode:
    return RichTextNode(type=NodeType.DOC.value, content=list(children))


def to_rich_text(value: Any) -> RichTextNode | None:
    """Coerce a stored rich-text field into a tree.

    ``None`` stays ``None`` (field absent). Strings are treated as the
    legacy HTML storage format; plain strings become one paragraph and the
    empty string an empty document.
    """
    if value is None or isinstance(value, RichTextNode):
        return value
    if isinstance(value, str):
        from resume_compiler.parsers.html_rich_text import html_to_rich_text

        return html_to_rich_text(value)
    return RichTextNode.model_validate(value)
