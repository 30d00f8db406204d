"""Package the document model as a .docx artifact and hand it off."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from io import BytesIO
from pathlib import Path

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_TAB_ALIGNMENT
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Pt, RGBColor, Twips

from resume_compiler.config import ExportConfig, StyleSheet
from resume_compiler.models.document import (
    BorderRule,
    DocumentModel,
    ParagraphModel,
    ParagraphRole,
    RunModel,
)

logger = logging.getLogger(__name__)

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
HEADING_STYLE = "Heading 2"
BULLET_STYLE = "List Bullet"

# Children of w:pPr that must follow w:pBdr (ECMA-376 sequence order).
_PBDR_SUCCESSORS = (
    "w:shd", "w:tabs", "w:suppressAutoHyphens", "w:kinsoku", "w:wordWrap",
    "w:overflowPunct", "w:topLinePunct", "w:autoSpaceDE", "w:autoSpaceDN",
    "w:bidi", "w:adjustRightInd", "w:snapToGrid", "w:spacing", "w:ind",
    "w:contextualSpacing", "w:mirrorIndents", "w:suppressOverlap", "w:jc",
    "w:textDirection", "w:textAlignment", "w:textboxTightWrap",
    "w:outlineLvl", "w:divId", "w:cnfStyle", "w:rPr", "w:sectPr", "w:pPrChange",
)
_THEME_FONT_ATTRS = ("w:asciiTheme", "w:hAnsiTheme", "w:eastAsiaTheme", "w:cstheme")


@dataclass(frozen=True)
class Artifact:
    filename: str
    data: bytes
    media_type: str = DOCX_MEDIA_TYPE


class ExportError(Exception):
    """Packaging or hand-off failed; no artifact was delivered."""

    def __init__(self, stage: str, message: str):
        super().__init__(f"{stage} failed: {message}")
        self.stage = stage  # "pack" | "save"
        self.message = message


@dataclass
class ExportResult:
    artifact: Artifact | None = None
    error: ExportError | None = None
    location: Path | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.artifact is not None


Saver = Callable[[Artifact], Path | None]


# ---------------------------------------------------------------------------
# Packing
# ---------------------------------------------------------------------------

def pack(model: DocumentModel) -> bytes:
    """Render ``model`` with python-docx and return the .docx bytes."""
    style = model.style
    doc = Document()
    _apply_page(doc, style)
    _apply_styles(doc, style)

    for para in model.paragraphs:
        _add_paragraph(doc, para, style)

    name = next((p.text for p in model.paragraphs if p.role == ParagraphRole.NAME), "")
    doc.core_properties.title = f"Resume - {name}" if name else "Resume"
    doc.core_properties.author = name

    buffer = BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def _apply_page(doc, style: StyleSheet) -> None:
    for section in doc.sections:
        section.page_width = Inches(style.page_width_in)
        section.page_height = Inches(style.page_height_in)
        section.top_margin = Inches(style.margin_in)
        section.bottom_margin = Inches(style.margin_in)
        section.left_margin = Inches(style.margin_in)
        section.right_margin = Inches(style.margin_in)


def _apply_styles(doc, style: StyleSheet) -> None:
    normal = doc.styles["Normal"]
    normal.font.name = style.font_name
    normal.font.size = Pt(style.body_size)
    normal.paragraph_format.line_spacing = style.line_spacing
    normal.paragraph_format.space_after = Pt(style.paragraph_space_after)

    heading = doc.styles[HEADING_STYLE]
    heading.font.name = style.font_name
    heading.font.size = Pt(style.heading_size)
    heading.font.bold = True
    heading.font.italic = False
    heading.font.all_caps = True
    heading.font.color.rgb = RGBColor(0, 0, 0)
    heading.paragraph_format.space_before = Pt(style.heading_space_before)
    heading.paragraph_format.space_after = Pt(style.heading_space_after)

    bullet = doc.styles[BULLET_STYLE]
    bullet.font.name = style.font_name
    bullet.font.size = Pt(style.body_size)

    _pin_fonts(doc, style.font_name)


def _pin_fonts(doc, font_name: str) -> None:
    """Replace theme font references in every style and the doc defaults.

    A theme attribute on ``w:rFonts`` overrides the explicit name, so the
    template's Heading styles would otherwise keep the theme heading font.
    """
    for rfonts in doc.styles.element.iter(qn("w:rFonts")):
        for attr in _THEME_FONT_ATTRS:
            rfonts.attrib.pop(qn(attr), None)
        for attr in ("w:ascii", "w:hAnsi", "w:eastAsia", "w:cs"):
            rfonts.set(qn(attr), font_name)


def _add_paragraph(doc, para: ParagraphModel, style: StyleSheet) -> None:
    if para.role == ParagraphRole.HEADING:
        p = doc.add_paragraph(style=HEADING_STYLE)
    elif para.bullet_level is not None:
        # Only one bullet level exists; deeper levels are never produced.
        p = doc.add_paragraph(style=BULLET_STYLE)
    else:
        p = doc.add_paragraph()

    if para.alignment == "center":
        p.alignment = WD_ALIGN_PARAGRAPH.CENTER

    fmt = p.paragraph_format
    if para.space_before_pt is not None:
        fmt.space_before = Pt(para.space_before_pt)
    if para.space_after_pt is not None:
        fmt.space_after = Pt(para.space_after_pt)
    for stop in para.tab_stops:
        alignment = WD_TAB_ALIGNMENT.RIGHT if stop.alignment == "right" else WD_TAB_ALIGNMENT.LEFT
        fmt.tab_stops.add_tab_stop(Twips(stop.position_twips), alignment)
    if para.bottom_border is not None:
        _set_bottom_border(p, para.bottom_border)

    for run_model in para.runs:
        _add_run(p, run_model, style)


def _add_run(p, model: RunModel, style: StyleSheet) -> None:
    run = p.add_run(model.text)
    # Only set flags that are on, so paragraph styles keep their defaults.
    if model.bold:
        run.bold = True
    if model.italic:
        run.italic = True
    if model.all_caps:
        run.font.all_caps = True
    if model.size_pt is not None:
        run.font.size = Pt(model.size_pt)
    if model.link:
        run.font.underline = True
        run.font.color.rgb = RGBColor.from_string(style.link_color)


def _set_bottom_border(p, border: BorderRule) -> None:
    pPr = p._p.get_or_add_pPr()
    pBdr = OxmlElement("w:pBdr")
    bottom = OxmlElement("w:bottom")
    bottom.set(qn("w:val"), border.style)
    bottom.set(qn("w:sz"), str(border.size))
    bottom.set(qn("w:space"), str(border.space))
    bottom.set(qn("w:color"), border.color)
    pBdr.append(bottom)
    pPr.insert_element_before(pBdr, *_PBDR_SUCCESSORS)


# ---------------------------------------------------------------------------
# Naming and hand-off
# ---------------------------------------------------------------------------

def build_filename(
    now: datetime | None = None,
    *,
    prefix: str = "Resume",
    timestamp_format: str = "%Y-%m-%dT%H-%M-%S-%f",
    ext: str = "docx",
) -> str:
    """``"Resume - 2026-10-19T14-03-22-123456.docx"`` (filesystem-safe)."""
    now = now or datetime.now()
    return f"{prefix} - {now.strftime(timestamp_format)}.{ext}"


class DirectorySaver:
    """Write artifacts into a directory; a file appears only once complete.

    Existing files are never overwritten: a name that is already taken gets
    a ``" (2)"``, ``" (3)"``... suffix before the extension.
    """

    def __init__(self, output_dir: str | Path, max_attempts: int = 100):
        self.output_dir = Path(output_dir)
        self.max_attempts = max_attempts

    def _candidates(self, filename: str):
        path = self.output_dir / filename
        yield path
        for n in range(2, self.max_attempts + 1):
            yield path.with_name(f"{path.stem} ({n}){path.suffix}")

    def __call__(self, artifact: Artifact) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.output_dir, prefix=".", suffix=".part")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(artifact.data)
            for target in self._candidates(artifact.filename):
                try:
                    # link() refuses an existing target
                    os.link(tmp_name, target)
                except FileExistsError:
                    continue
                return target
            raise FileExistsError(
                f"No free name for {artifact.filename} in {self.output_dir}"
            )
        finally:
            Path(tmp_name).unlink(missing_ok=True)


def export(
    model: DocumentModel,
    *,
    saver: Saver | None = None,
    now: datetime | None = None,
    config: ExportConfig | None = None,
) -> ExportResult:
    """Pack ``model`` and pass the artifact to ``saver``.

    Never raises: failures come back as ``ExportResult.error`` and no
    artifact is reported.
    """
    config = config or ExportConfig()
    filename = build_filename(
        now, prefix=config.filename_prefix, timestamp_format=config.timestamp_format
    )

    try:
        data = pack(model)
    except Exception as e:
        logger.exception("Failed to pack resume document")
        return ExportResult(error=ExportError("pack", str(e)))

    artifact = Artifact(filename=filename, data=data)
    location = None
    if saver is not None:
        try:
            location = saver(artifact)
        except Exception as e:
            logger.exception("Failed to save %s", filename)
            return ExportResult(error=ExportError("save", str(e)))

    logger.info("Exported %s (%d bytes)", filename, len(data))
    return ExportResult(artifact=artifact, location=location)
