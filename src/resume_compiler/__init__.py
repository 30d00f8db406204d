"""Compile structured resume records into styled .docx documents."""

from resume_compiler.compiler import (
    compile_resume,
    export_resume_async,
    export_resume_to_docx,
)
from resume_compiler.exporter import Artifact, DirectorySaver, ExportError, ExportResult

__version__ = "0.1.0"

__all__ = [
    "Artifact",
    "DirectorySaver",
    "ExportError",
    "ExportResult",
    "compile_resume",
    "export_resume_async",
    "export_resume_to_docx",
]
