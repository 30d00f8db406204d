"""Render document blocks into the container-independent document model."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from resume_compiler.config import StyleSheet
from resume_compiler.models.blocks import (
    Body,
    BulletLine,
    DocumentBlock,
    HeaderBlock,
    Heading,
    StyledRun,
    TwoColumnLine,
)
from resume_compiler.models.document import (
    BorderRule,
    DocumentModel,
    ParagraphModel,
    ParagraphRole,
    RunModel,
    TabStop,
)

logger = logging.getLogger(__name__)


def serialize(blocks: Sequence[DocumentBlock], style: StyleSheet | None = None) -> DocumentModel:
    """Lay out ``blocks`` as paragraphs, runs, borders and tab stops."""
    style = style or StyleSheet()
    paragraphs: list[ParagraphModel] = []
    for block in blocks:
        if isinstance(block, HeaderBlock):
            paragraphs.extend(_header(block, style))
        elif isinstance(block, Heading):
            paragraphs.append(_heading(block, style))
        elif isinstance(block, TwoColumnLine):
            paragraphs.append(_two_column(block, style))
        elif isinstance(block, Body):
            paragraphs.extend(_body(block, style))
        else:
            raise TypeError(f"Unknown document block: {type(block).__name__}")
    logger.debug("Serialized %d blocks into %d paragraphs", len(blocks), len(paragraphs))
    return DocumentModel(style=style, paragraphs=paragraphs)


def _runs(styled: Sequence[StyledRun]) -> list[RunModel]:
    return [RunModel(text=r.text, bold=r.bold, italic=r.italic) for r in styled]


def _header(block: HeaderBlock, style: StyleSheet) -> list[ParagraphModel]:
    name = ParagraphModel(
        role=ParagraphRole.NAME,
        runs=[RunModel(text=block.name, bold=True, size_pt=style.name_size)],
        alignment="center",
        space_after_pt=style.paragraph_space_after,
    )

    runs: list[RunModel] = []
    for item in block.contact:
        if runs:
            runs.append(RunModel(text=block.separator))
        runs.append(RunModel(text=item.text, link=item.link))
    contact = ParagraphModel(
        role=ParagraphRole.CONTACT,
        runs=runs,
        alignment="center",
        space_after_pt=style.paragraph_space_after,
    )
    return [name, contact]


def _heading(block: Heading, style: StyleSheet) -> ParagraphModel:
    return ParagraphModel(
        role=ParagraphRole.HEADING,
        runs=[RunModel(text=block.text, bold=True, all_caps=True)],
        space_before_pt=style.heading_space_before,
        space_after_pt=style.heading_space_after,
        bottom_border=BorderRule(
            size=style.border_size,
            space=style.border_space,
            color=style.border_color,
        ),
    )


def _two_column(block: TwoColumnLine, style: StyleSheet) -> ParagraphModel:
    runs = _runs(block.left)
    if block.right:
        runs.append(RunModel(text="\t"))
        runs.append(RunModel(text=block.right))
    return ParagraphModel(
        role=ParagraphRole.ENTRY,
        runs=runs,
        space_before_pt=style.entry_space_before if block.starts_entry else None,
        space_after_pt=style.paragraph_space_after,
        tab_stops=[TabStop(position_twips=style.tab_stop_twips, alignment="right")],
    )


def _body(block: Body, style: StyleSheet) -> list[ParagraphModel]:
    paragraphs = []
    for line in block.lines:
        bullet = isinstance(line, BulletLine)
        paragraphs.append(
            ParagraphModel(
                role=ParagraphRole.BULLET if bullet else ParagraphRole.BODY,
                runs=_runs(line.runs),
                space_after_pt=style.paragraph_space_after,
                bullet_level=0 if bullet else None,
            )
        )
    return paragraphs
