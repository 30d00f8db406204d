"""Data models for the resume compiler."""

from resume_compiler.models.blocks import (
    Body,
    BulletLine,
    ContactItem,
    DocumentBlock,
    HeaderBlock,
    Heading,
    PlainLine,
    StyledLine,
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
from resume_compiler.models.rich_text import MarkType, NodeType, RichTextNode

__all__ = [
    "Award",
    "Body",
    "BorderRule",
    "BulletLine",
    "Certification",
    "Contact",
    "ContactItem",
    "DocumentBlock",
    "DocumentModel",
    "Education",
    "Experience",
    "HeaderBlock",
    "Heading",
    "MarkType",
    "NodeType",
    "ParagraphModel",
    "ParagraphRole",
    "PlainLine",
    "Project",
    "ResumeRecord",
    "RichTextNode",
    "RunModel",
    "Skill",
    "StyledLine",
    "StyledRun",
    "TabStop",
    "TwoColumnLine",
]
