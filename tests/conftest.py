"""Shared test fixtures."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from resume_compiler.models.resume import (
    Award,
    Certification,
    Contact,
    Education,
    Experience,
    Project,
    ResumeRecord,
    Skill,
)
from resume_compiler.models.rich_text import (
    RichTextNode,
    bullet_list,
    doc,
    list_item,
    paragraph,
    text,
)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 10, 19, 14, 3, 22, 123456)


@pytest.fixture
def sample_description() -> RichTextNode:
    return doc(
        paragraph("Backend team lead for the payments platform."),
        bullet_list(
            list_item(paragraph(text("Built", bold=True), " the ledger service")),
            list_item(paragraph("Cut p99 latency by ", text("40%", italic=True))),
        ),
    )


@pytest.fixture
def sample_summary() -> RichTextNode:
    return doc(paragraph("Engineer focused on ", text("reliable", bold=True), " systems."))


@pytest.fixture
def sample_resume(sample_description, sample_summary) -> ResumeRecord:
    return ResumeRecord(
        contact=Contact(
            full_name="Ada Lovelace",
            email="ada@example.com",
            phone="+44 20 7946 0000",
            city="London",
            country="United Kingdom",
            portfolio="https://ada.dev",
            linkedin="https://linkedin.com/in/ada",
        ),
        summary=sample_summary,
        experiences=[
            Experience(
                id="exp-1",
                title="Staff Engineer",
                company="Analytical Engines Ltd",
                location="London",
                location_type="HYBRID",
                start_date=date(2021, 7, 1),
                end_date=None,
                description=sample_description,
            ),
            Experience(
                id="exp-2",
                title="Software Engineer",
                company="Difference Co",
                location="Remote",
                location_type="REMOTE",
                start_date=date(2018, 3, 1),
                end_date=date(2021, 6, 1),
            ),
        ],
        educations=[
            Education(
                id="edu-1",
                school="University of London",
                degree="BSc",
                field_of_study="Mathematics",
                gpa=3.8,
                gpa_max=4.0,
                location="London",
                start_date=date(2014, 9, 1),
                end_date=date(2018, 6, 1),
            ),
        ],
        projects=[
            Project(
                id="proj-1",
                title="Note G",
                start_date=date(2020, 1, 1),
                end_date=date(2020, 5, 1),
                description=doc(bullet_list("Computed Bernoulli numbers")),
            ),
        ],
        skills=[Skill(name="Go"), Skill(name="Rust"), Skill(name="Python")],
        certifications=[
            Certification(
                id="cert-1",
                name="Certified Kubernetes Administrator",
                issuer="CNCF",
                issue_date=date(2022, 2, 1),
                expiry_date=date(2025, 2, 1),
                credential_id="CKA-1234",
            ),
        ],
        awards=[
            Award(
                id="award-1",
                title="Engineer of the Year",
                issuer="Analytical Society",
                date=date(2023, 12, 1),
                description=doc(paragraph("For the ledger migration.")),
            ),
        ],
    )


@pytest.fixture
def minimal_resume() -> ResumeRecord:
    return ResumeRecord(contact=Contact(full_name="Ada Lovelace", email="ada@example.com"))


@pytest.fixture
def sample_record_data() -> dict:
    """Resume record as the web API returns it (camelCase, ISO dates, HTML)."""
    return {
        "contact": {
            "fullName": "Grace Hopper",
            "email": "grace@example.com",
            "city": "Arlington",
            "country": "USA",
        },
        "summary": "Compiler pioneer.",
        "experiences": [
            {
                "id": "e1",
                "title": "Rear Admiral",
                "company": "US Navy",
                "location": "Washington",
                "locationType": "ON_SITE",
                "startDate": "1967-08-01T00:00:00.000Z",
                "endDate": None,
                "description": "<ul><li><strong>Standardised</strong> COBOL</li></ul>",
            }
        ],
        "skills": [{"name": "COBOL"}, {"name": "FLOW-MATIC"}],
    }
