"""End-to-end entry point: resume record in, .docx artifact out."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime

from resume_compiler.assembler import assemble
from resume_compiler.config import AppConfig
from resume_compiler.exporter import ExportResult, Saver, export
from resume_compiler.models.document import DocumentModel
from resume_compiler.models.resume import ResumeRecord
from resume_compiler.serializer import serialize

logger = logging.getLogger(__name__)


def compile_resume(resume: ResumeRecord, config: AppConfig | None = None) -> DocumentModel:
    """Assemble and serialize ``resume`` without packaging it."""
    config = config or AppConfig()
    blocks = assemble(resume, config.text)
    return serialize(blocks, config.style)


def export_resume_to_docx(
    resume: ResumeRecord,
    *,
    config: AppConfig | None = None,
    saver: Saver | None = None,
    notify: Callable[[ExportResult], None] | None = None,
    now: datetime | None = None,
) -> ExportResult:
    """Compile ``resume`` into a .docx artifact and deliver it.

    Every call works on its own snapshot, so repeated or concurrent exports
    are independent. The outcome is passed to ``notify`` (if given) and
    also returned.
    """
    config = config or AppConfig()
    resume = resume.model_copy(deep=True)
    model = compile_resume(resume, config)
    result = export(model, saver=saver, now=now, config=config.export)
    if result.ok:
        logger.debug("Resume export succeeded: %s", result.artifact.filename)
    else:
        logger.warning("Resume export failed: %s", result.error)
    if notify is not None:
        notify(result)
    return result


async def export_resume_async(
    resume: ResumeRecord,
    *,
    config: AppConfig | None = None,
    saver: Saver | None = None,
    notify: Callable[[ExportResult], None] | None = None,
    now: datetime | None = None,
) -> ExportResult:
    """Run :func:`export_resume_to_docx` in a worker thread.

    The record is copied before the thread starts, so the caller may keep
    editing it while the export runs.
    """
    snapshot = resume.model_copy(deep=True)
    return await asyncio.to_thread(
        export_resume_to_docx,
        snapshot,
        config=config,
        saver=saver,
        notify=notify,
        now=now,
    )
