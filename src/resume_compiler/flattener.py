"""Flatten editor rich-text trees into ordered styled lines."""

from __future__ import annotations

import logging

from resume_compiler.models.blocks import BulletLine, PlainLine, StyledLine, StyledRun
from resume_compiler.models.rich_text import MarkType, NodeType, RichTextNode

logger = logging.getLogger(__name__)


def flatten(node: RichTextNode) -> list[StyledLine]:
    """Walk a document tree depth-first and return its lines in order.

    Top-level paragraphs become :class:`PlainLine`, list items become
    :class:`BulletLine`. Paragraphs without any text are dropped. Lists
    nested inside a list item come out as sibling bullets (one level only).
    Children of nodes that cannot hold them are ignored, so a malformed
    tree never raises.
    """
    lines: list[StyledLine] = []
    if node.type == NodeType.DOC.value:
        for child in node.content:
            _flatten_block(child, lines)
    else:
        # Tolerate a bare block passed without its document root.
        _flatten_block(node, lines)
    return lines


def _flatten_block(node: RichTextNode, lines: list[StyledLine]) -> None:
    if node.type == NodeType.PARAGRAPH.value:
        runs = _collect_runs(node, bold=False, italic=False)
        if runs:
            lines.append(PlainLine(runs=runs))
    elif node.type == NodeType.BULLET_LIST.value:
        for item in node.content:
            _flatten_list_item(item, lines)
    elif node.type == NodeType.TEXT.value:
        # Loose text outside a paragraph still reads as a line.
        runs = _collect_runs(node, bold=False, italic=False)
        if runs:
            lines.append(PlainLine(runs=runs))
    else:
        logger.debug("Skipping unsupported rich-text block %r", node.type)


def _flatten_list_item(node: RichTextNode, lines: list[StyledLine]) -> None:
    if node.type not in (NodeType.LIST_ITEM.value, NodeType.PARAGRAPH.value):
        logger.debug("Skipping %r inside a bullet list", node.type)
        return
    if node.type == NodeType.PARAGRAPH.value:
        children = [node]
    else:
        children = node.content

    for child in children:
        if child.type == NodeType.PARAGRAPH.value:
            runs = _collect_runs(child, bold=False, italic=False)
            if runs:
                lines.append(BulletLine(runs=runs))
        elif child.type == NodeType.BULLET_LIST.value:
            for nested in child.content:
                _flatten_list_item(nested, lines)
        else:
            logger.debug("Skipping %r inside a list item", child.type)


def _collect_runs(node: RichTextNode, *, bold: bool, italic: bool) -> list[StyledRun]:
    """Gather the text leaves under ``node`` with their inherited marks."""
    bold = bold or node.has_mark(MarkType.BOLD)
    italic = italic or node.has_mark(MarkType.ITALIC)

    if node.type == NodeType.TEXT.value:
        if not node.text:
            return []
        return [StyledRun(text=node.text, bold=bold, italic=italic)]

    runs: list[StyledRun] = []
    for child in node.content:
        if child.type in (NodeType.BULLET_LIST.value, NodeType.LIST_ITEM.value):
            logger.debug("Ignoring %r nested in an inline context", child.type)
            continue
        runs.extend(_collect_runs(child, bold=bold, italic=italic))
    return runs
