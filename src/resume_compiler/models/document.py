"""Container-independent document object model produced by the serializer."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from resume_compiler.config import StyleSheet


class ParagraphRole(str, Enum):
    NAME = "name"
    CONTACT = "contact"
    HEADING = "heading"
    ENTRY = "entry"  # two-column line
    BODY = "body"
    BULLET = "bullet"


class RunModel(BaseModel):
    text: str
    bold: bool = False
    italic: bool = False
    all_caps: bool = False
    size_pt: float | None = None  # None: inherit from the paragraph style
    link: bool = False


class TabStop(BaseModel):
    position_twips: int
    alignment: Literal["left", "right"] = "right"


class BorderRule(BaseModel):
    style: str = "single"
    size: int = 6  # eighths of a point
    space: int = 1  # points
    color: str = "auto"


class ParagraphModel(BaseModel):
    role: ParagraphRole
    runs: list[RunModel] = Field(default_factory=list)
    alignment: Literal["left", "center"] = "left"
    space_before_pt: float | None = None
    space_after_pt: float | None = None
    tab_stops: list[TabStop] = Field(default_factory=list)
    bottom_border: BorderRule | None = None
    bullet_level: int | None = None

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


class DocumentModel(BaseModel):
    style: StyleSheet
    paragraphs: list[ParagraphModel] = Field(default_factory=list)

    def text_lines(self) -> list[str]:
        return [p.text for p in self.paragraphs]
