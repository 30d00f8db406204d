"""Convert legacy HTML rich-text strings into editor document trees."""

from __future__ import annotations

import logging
import re

from lxml import etree
from lxml import html as lxml_html

from resume_compiler.models.rich_text import (
    NodeType,
    RichTextNode,
    doc,
    paragraph,
    text,
)

logger = logging.getLogger(__name__)

_LIST_TAGS = {"ul", "ol"}
_BLOCK_TAGS = {"p", "div", "h1", "h2", "h3", "h4", "h5", "h6", "blockquote", "pre"}
_BOLD_TAGS = {"strong", "b"}
_ITALIC_TAGS = {"em", "i"}
_WHITESPACE = re.compile(r"\s+")


def html_to_rich_text(markup: str) -> RichTextNode:
    """Parse an HTML fragment (``<p>``, ``<ul><li>``, ``<strong>``, ``<em>``).

    Plain strings without markup become one paragraph per non-blank line.
    Never raises: markup lxml cannot parse is kept as a single paragraph.
    """
    if not markup.strip():
        return doc()
    if "<" not in markup:
        lines = [line.strip() for line in markup.splitlines()]
        return doc(*(paragraph(line) for line in lines if line))

    try:
        root = lxml_html.fragment_fromstring(markup, create_parent="div")
    except (etree.LxmlError, ValueError):
        logger.debug("Unparsable rich-text HTML, keeping raw text: %.40r", markup)
        return doc(paragraph(markup.strip()))

    return doc(*_convert_blocks(root))


def _convert_blocks(container) -> list[RichTextNode]:
    """Convert the children of a block container into block nodes."""
    blocks: list[RichTextNode] = []
    pending: list[RichTextNode] = []

    def flush() -> None:
        para = _make_paragraph(pending, keep_empty=False)
        if para is not None:
            blocks.append(para)
        pending.clear()

    if container.text:
        pending.append(text(container.text))

    for child in container:
        if not isinstance(child.tag, str):
            pass  # comments, processing instructions
        elif child.tag in _LIST_TAGS:
            flush()
            blocks.append(_convert_list(child))
        elif child.tag in _BLOCK_TAGS:
            flush()
            blocks.extend(_convert_block(child))
        else:
            pending.extend(_inline_runs(child, bold=False, italic=False))
        if child.tail:
            pending.append(text(child.tail))

    flush()
    return blocks


def _convert_block(element) -> list[RichTextNode]:
    # A block holding nested lists or blocks is treated as a container.
    if any(isinstance(c.tag, str) and c.tag in _LIST_TAGS | _BLOCK_TAGS for c in element):
        return _convert_blocks(element)
    runs = _inline_children(element, bold=False, italic=False)
    return [_make_paragraph(runs, keep_empty=True)]


def _convert_list(element) -> RichTextNode:
    items = []
    for child in element:
        if isinstance(child.tag, str) and child.tag == "li":
            items.append(
                RichTextNode(type=NodeType.LIST_ITEM.value, content=_convert_blocks(child))
            )
    return RichTextNode(type=NodeType.BULLET_LIST.value, content=items)


def _inline_children(element, *, bold: bool, italic: bool) -> list[RichTextNode]:
    runs: list[RichTextNode] = []
    if element.text:
        runs.append(text(element.text, bold=bold, italic=italic))
    for child in element:
        if isinstance(child.tag, str):
            runs.extend(_inline_runs(child, bold=bold, italic=italic))
        if child.tail:
            runs.append(text(child.tail, bold=bold, italic=italic))
    return runs


def _inline_runs(element, *, bold: bool, italic: bool) -> list[RichTextNode]:
    if element.tag == "br":
        return [text(" ", bold=bold, italic=italic)]
    return _inline_children(
        element,
        bold=bold or element.tag in _BOLD_TAGS,
        italic=italic or element.tag in _ITALIC_TAGS,
    )


def _make_paragraph(runs: list[RichTextNode], *, keep_empty: bool) -> RichTextNode | None:
    """Collapse HTML whitespace and trim the paragraph edges."""
    cleaned: list[RichTextNode] = []
    for run in runs:
        value = _WHITESPACE.sub(" ", run.text or "")
        if cleaned and cleaned[-1].text.endswith(" ") and value.startswith(" "):
            value = value[1:]
        if value:
            cleaned.append(run.model_copy(update={"text": value}))

    if cleaned:
        cleaned[0] = cleaned[0].model_copy(update={"text": cleaned[0].text.lstrip()})
        cleaned[-1] = cleaned[-1].model_copy(update={"text": cleaned[-1].text.rstrip()})
        cleaned = [run for run in cleaned if run.text]

    if not cleaned and not keep_empty:
        return None
    return paragraph(*cleaned)
