"""Assemble a resume record into the ordered list of document blocks."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from resume_compiler.config import FallbackText
from resume_compiler.flattener import flatten
from resume_compiler.models.blocks import (
    Body,
    ContactItem,
    DocumentBlock,
    HeaderBlock,
    Heading,
    PlainLine,
    StyledRun,
    TwoColumnLine,
)
from resume_compiler.models.resume import (
    Award,
    Certification,
    Education,
    Experience,
    Project,
    ResumeRecord,
)
from resume_compiler.models.rich_text import RichTextNode

logger = logging.getLogger(__name__)

# Locale-independent, unlike strftime("%b").
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

LOCATION_TYPE_LABELS = {
    "ON_SITE": "On-site",
    "REMOTE": "Remote",
    "HYBRID": "Hybrid",
}

SectionBuilder = Callable[[ResumeRecord, FallbackText], list[DocumentBlock]]


def assemble(resume: ResumeRecord, text: FallbackText | None = None) -> list[DocumentBlock]:
    """Build every section group in the fixed resume order.

    Groups whose backing data is empty contribute no blocks at all.
    """
    text = text or FallbackText()
    blocks: list[DocumentBlock] = []
    for build in SECTION_BUILDERS:
        blocks.extend(build(resume, text))
    logger.debug("Assembled %d blocks", len(blocks))
    return blocks


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def _has_text(value: str | None) -> bool:
    return value is not None and value.strip() != ""


def format_month_year(value: date) -> str:
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.year}"


def format_date_range(start: date | None, end: date | None, text: FallbackText) -> str:
    """``"Jul 2021 - Present"``; a missing start reads ``"N/A"``."""
    left = format_month_year(start) if start else text.missing_start
    right = format_month_year(end) if end else text.ongoing_end
    return f"{left}{text.date_separator}{right}"


def format_number(value: float) -> str:
    """3.0 -> "3", 3.85 -> "3.85", 3.14159265 -> "3.14159265"."""
    # 15 significant digits round-trips any decimal a user can type.
    return f"{value:.15g}"


def format_gpa(gpa: float | None, gpa_max: float | None) -> str:
    if gpa is None:
        return ""
    result = f"GPA: {format_number(gpa)}"
    if gpa_max is not None:
        result += f"/{format_number(gpa_max)}"
    return result


def display_location_type(value: str | None) -> str:
    if not _has_text(value):
        return ""
    key = value.strip().upper()
    if key in LOCATION_TYPE_LABELS:
        return LOCATION_TYPE_LABELS[key]
    return " ".join(word.capitalize() for word in value.replace("_", " ").split())


def _bold(value: str) -> StyledRun:
    return StyledRun(text=value, bold=True)


def _description(node: RichTextNode | None) -> list[DocumentBlock]:
    if node is None:
        return []
    return [Body(lines=flatten(node))]


# ---------------------------------------------------------------------------
# Section groups
# ---------------------------------------------------------------------------

def _header(resume: ResumeRecord, text: FallbackText) -> list[DocumentBlock]:
    contact = resume.contact
    name = contact.full_name.strip() if _has_text(contact.full_name) else text.name

    location = ", ".join(
        part.strip() for part in (contact.city, contact.country) if _has_text(part)
    )
    candidates = [
        (location, False),
        (contact.phone, False),
        (contact.email, False),
        (contact.portfolio, True),
        (contact.linkedin, True),
    ]
    items = [
        ContactItem(text=value.strip(), link=link)
        for value, link in candidates
        if _has_text(value)
    ]
    return [HeaderBlock(name=name, contact=items, separator=text.contact_separator)]


def _summary(resume: ResumeRecord, text: FallbackText) -> list[DocumentBlock]:
    if resume.summary is None:
        return []
    return [Heading(text=text.summary_heading), Body(lines=flatten(resume.summary))]


def _experience_entry(exp: Experience, text: FallbackText) -> list[DocumentBlock]:
    blocks: list[DocumentBlock] = [
        TwoColumnLine(
            left=[_bold(exp.title)],
            right=format_date_range(exp.start_date, exp.end_date, text),
            starts_entry=True,
        )
    ]

    location = exp.location.strip() if _has_text(exp.location) else ""
    location_type = display_location_type(exp.location_type)
    if location and location_type:
        where = f"{location} ({location_type})"
    else:
        where = location or location_type

    if _has_text(exp.company) or where:
        left = [_bold(exp.company)] if _has_text(exp.company) else []
        blocks.append(TwoColumnLine(left=left, right=where))

    blocks.extend(_description(exp.description))
    return blocks


def _experience(resume: ResumeRecord, text: FallbackText) -> list[DocumentBlock]:
    if not resume.experiences:
        return []
    blocks: list[DocumentBlock] = [Heading(text=text.experience_heading)]
    for exp in resume.experiences:
        blocks.extend(_experience_entry(exp, text))
    return blocks


def _education_entry(edu: Education, text: FallbackText) -> list[DocumentBlock]:
    blocks: list[DocumentBlock] = [
        TwoColumnLine(
            left=[_bold(edu.school)],
            right=format_date_range(edu.start_date, edu.end_date, text),
            starts_entry=True,
        )
    ]

    parts = [edu.degree, edu.field_of_study, format_gpa(edu.gpa, edu.gpa_max)]
    detail = ", ".join(p.strip() for p in parts if _has_text(p))
    location = edu.location.strip() if _has_text(edu.location) else ""
    if detail or location:
        left = [StyledRun(text=detail)] if detail else []
        blocks.append(TwoColumnLine(left=left, right=location))

    blocks.extend(_description(edu.description))
    return blocks


def _education(resume: ResumeRecord, text: FallbackText) -> list[DocumentBlock]:
    if not resume.educations:
        return []
    blocks: list[DocumentBlock] = [Heading(text=text.education_heading)]
    for edu in resume.educations:
        blocks.extend(_education_entry(edu, text))
    return blocks


def _project_entry(project: Project, text: FallbackText) -> list[DocumentBlock]:
    blocks: list[DocumentBlock] = [
        TwoColumnLine(
            left=[_bold(project.title)],
            right=format_date_range(project.start_date, project.end_date, text),
            starts_entry=True,
        )
    ]
    blocks.extend(_description(project.description))
    return blocks


def _projects(resume: ResumeRecord, text: FallbackText) -> list[DocumentBlock]:
    if not resume.projects:
        return []
    blocks: list[DocumentBlock] = [Heading(text=text.projects_heading)]
    for project in resume.projects:
        blocks.extend(_project_entry(project, text))
    return blocks


def _skills(resume: ResumeRecord, text: FallbackText) -> list[DocumentBlock]:
    if not resume.skills:
        return []
    joined = ", ".join(skill.name for skill in resume.skills)
    return [
        Heading(text=text.skills_heading),
        Body(lines=[PlainLine(runs=[StyledRun(text=f"{joined}.")])]),
    ]


def _certification_entry(cert: Certification, text: FallbackText) -> list[DocumentBlock]:
    left = [_bold(cert.name)]
    if _has_text(cert.issuer):
        left.append(StyledRun(text=f" – {cert.issuer.strip()}"))

    issued = format_month_year(cert.issue_date) if cert.issue_date else text.missing_start
    if cert.expiry_date:
        issued += f"{text.date_separator}{format_month_year(cert.expiry_date)}"

    blocks: list[DocumentBlock] = [TwoColumnLine(left=left, right=issued, starts_entry=True)]
    if _has_text(cert.credential_id):
        line = PlainLine(runs=[StyledRun(text=f"{text.credential_prefix}{cert.credential_id.strip()}")])
        blocks.append(Body(lines=[line]))
    return blocks


def _certifications(resume: ResumeRecord, text: FallbackText) -> list[DocumentBlock]:
    if not resume.certifications:
        return []
    blocks: list[DocumentBlock] = [Heading(text=text.certifications_heading)]
    for cert in resume.certifications:
        blocks.extend(_certification_entry(cert, text))
    return blocks


def _award_entry(award: Award, text: FallbackText) -> list[DocumentBlock]:
    awarded = format_month_year(award.date) if award.date else ""
    blocks: list[DocumentBlock] = [
        TwoColumnLine(left=[_bold(award.title)], right=awarded, starts_entry=True)
    ]
    if _has_text(award.issuer):
        line = PlainLine(runs=[StyledRun(text=f"{text.issuer_prefix}{award.issuer.strip()}")])
        blocks.append(Body(lines=[line]))
    blocks.extend(_description(award.description))
    return blocks


def _awards(resume: ResumeRecord, text: FallbackText) -> list[DocumentBlock]:
    if not resume.awards:
        return []
    blocks: list[DocumentBlock] = [Heading(text=text.awards_heading)]
    for award in resume.awards:
        blocks.extend(_award_entry(award, text))
    return blocks


SECTION_BUILDERS: tuple[SectionBuilder, ...] = (
    _header,
    _summary,
    _experience,
    _education,
    _projects,
    _skills,
    _certifications,
    _awards,
)
