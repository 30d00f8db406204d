"""Intermediate models: styled lines and the assembled document blocks."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class StyledRun(BaseModel):
    text: str
    bold: bool = False
    italic: bool = False


class PlainLine(BaseModel):
    kind: Literal["plain"] = "plain"
    runs: list[StyledRun]

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


class BulletLine(BaseModel):
    kind: Literal["bullet"] = "bullet"
    runs: list[StyledRun]

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


StyledLine = Annotated[Union[PlainLine, BulletLine], Field(discriminator="kind")]


class ContactItem(BaseModel):
    text: str
    link: bool = False


class HeaderBlock(BaseModel):
    """Centered name line followed by the contact line."""

    kind: Literal["header"] = "header"
    name: str
    contact: list[ContactItem] = Field(default_factory=list)
    separator: str = " • "

    def contact_text(self) -> str:
        return self.separator.join(item.text for item in self.contact)


class Heading(BaseModel):
    kind: Literal["heading"] = "heading"
    text: str


class TwoColumnLine(BaseModel):
    """Left runs, then right-tab-aligned plain text (usually a date range)."""

    kind: Literal["two_column"] = "two_column"
    left: list[StyledRun]
    right: str = ""
    starts_entry: bool = False

    @property
    def left_text(self) -> str:
        return "".join(run.text for run in self.left)


class Body(BaseModel):
    kind: Literal["body"] = "body"
    lines: list[StyledLine] = Field(default_factory=list)


DocumentBlock = Annotated[
    Union[HeaderBlock, Heading, TwoColumnLine, Body],
    Field(discriminator="kind"),
]
