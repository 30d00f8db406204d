"""Pydantic models for the resume record handed to the compiler."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from resume_compiler.models.rich_text import RichTextNode, to_rich_text

# Award.date shadows the type name inside its class body.
DateValue = date


def _coerce_date(value: Any) -> Any:
    """Accept dates, datetimes and ISO strings (with or without a time part)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        return date.fromisoformat(value[:10])
    return value


class RecordModel(BaseModel):
    """Base for all record models: accepts snake_case and camelCase keys."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
    }


class Contact(RecordModel):
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    country: str | None = None
    linkedin: str | None = None
    github: str | None = None
    portfolio: str | None = None


class DatedEntry(RecordModel):
    id: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    description: RichTextNode | None = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _dates(cls, v: Any) -> Any:
        return _coerce_date(v)

    @field_validator("description", mode="before")
    @classmethod
    def _rich_text(cls, v: Any) -> Any:
        return to_rich_text(v)


class Experience(DatedEntry):
    title: str = ""
    company: str = ""
    location: str | None = None
    location_type: str | None = None  # ON_SITE, REMOTE, HYBRID
    employment_type: str | None = None


class Education(DatedEntry):
    school: str = ""
    degree: str | None = None
    field_of_study: str | None = None
    location: str | None = None
    gpa: float | None = None
    gpa_max: float | None = None


class Project(DatedEntry):
    title: str = ""


class Skill(RecordModel):
    id: str | None = None
    name: str
    category: str | None = None
    proficiency: str | None = None


class Certification(RecordModel):
    id: str | None = None
    name: str = ""
    issuer: str | None = None
    issue_date: date | None = None
    expiry_date: date | None = None
    credential_id: str | None = None

    @field_validator("issue_date", "expiry_date", mode="before")
    @classmethod
    def _dates(cls, v: Any) -> Any:
        return _coerce_date(v)


class Award(RecordModel):
    id: str | None = None
    title: str = ""
    issuer: str | None = None
    date: DateValue | None = None
    description: RichTextNode | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _date(cls, v: Any) -> Any:
        return _coerce_date(v)

    @field_validator("description", mode="before")
    @classmethod
    def _rich_text(cls, v: Any) -> Any:
        return to_rich_text(v)


class ResumeRecord(RecordModel):
    """One complete resume; every list keeps the user's display order."""

    contact: Contact = Field(default_factory=Contact)
    summary: RichTextNode | None = None
    experiences: list[Experience] = Field(default_factory=list)
    educations: list[Education] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)
    awards: list[Award] = Field(default_factory=list)

    @field_validator("summary", mode="before")
    @classmethod
    def _rich_text(cls, v: Any) -> Any:
        return to_rich_text(v)

    @field_validator(
        "experiences", "educations", "projects", "skills", "certifications", "awards",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v
