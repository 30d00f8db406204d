"""Helpers for the web preview: markdown-safe outline and upload identity."""

from __future__ import annotations

import hashlib
import re

from resume_compiler.models.document import DocumentModel, ParagraphRole

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|<>~$])")


def escape_markdown(text: str) -> str:
    """Backslash-escape characters markdown would treat as formatting."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def outline_markdown(model: DocumentModel, tab: str = "  ·  ") -> list[str]:
    """One markdown line per non-empty paragraph, with record text escaped."""
    lines: list[str] = []
    for para in model.paragraphs:
        text = para.text.replace("\t", tab)
        if not text.strip():
            continue
        safe = escape_markdown(text)
        if para.role == ParagraphRole.NAME:
            lines.append(f"### {safe}")
        elif para.role == ParagraphRole.HEADING:
            lines.append(f"**{escape_markdown(text.upper())}**")
        elif para.bullet_level is not None:
            lines.append(f"- {safe}")
        else:
            lines.append(safe)
    return lines


def upload_key(data: bytes) -> str:
    """Stable identity of an uploaded record, used to scope its artifact."""
    return hashlib.sha256(data).hexdigest()
