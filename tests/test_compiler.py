"""Tests for the end-to-end compile and export entry points."""

from __future__ import annotations

import asyncio
import zipfile
from io import BytesIO

import pytest

from resume_compiler import compiler
from resume_compiler.compiler import (
    compile_resume,
    export_resume_async,
    export_resume_to_docx,
)
from resume_compiler.config import AppConfig, ExportConfig, FallbackText, StyleSheet
from resume_compiler.exporter import DirectorySaver, ExportResult
from resume_compiler.models.document import ParagraphRole


def _document_xml(data: bytes) -> bytes:
    with zipfile.ZipFile(BytesIO(data)) as zf:
        return zf.read("word/document.xml")


class TestCompileResume:
    def test_uses_config_text_and_style(self, sample_resume):
        config = AppConfig(
            style=StyleSheet(name_size=20),
            text=FallbackText(summary_heading="Profile"),
        )
        model = compile_resume(sample_resume, config)
        headings = [p.text for p in model.paragraphs if p.role == ParagraphRole.HEADING]
        assert headings[0] == "Profile"
        assert model.paragraphs[0].runs[0].size_pt == 20

    def test_defaults(self, minimal_resume):
        model = compile_resume(minimal_resume)
        assert model.text_lines() == ["Ada Lovelace", "ada@example.com"]


class TestExportResumeToDocx:
    def test_notify_called_once_on_success(self, sample_resume, fixed_now):
        seen: list[ExportResult] = []
        result = export_resume_to_docx(sample_resume, notify=seen.append, now=fixed_now)
        assert result.ok
        assert seen == [result]
        assert result.artifact.filename.startswith("Resume - 2026-10-19T14-03-22")

    def test_notify_called_on_failure(self, sample_resume):
        seen: list[ExportResult] = []

        def refuse(artifact):
            raise OSError("no space left")

        result = export_resume_to_docx(sample_resume, saver=refuse, notify=seen.append)
        assert not result.ok
        assert seen == [result]
        assert result.error.stage == "save"

    def test_saves_to_directory(self, sample_resume, tmp_path):
        config = AppConfig(export=ExportConfig(output_dir=str(tmp_path)))
        result = export_resume_to_docx(
            sample_resume,
            config=config,
            saver=DirectorySaver(config.export.resolved_output_dir),
        )
        assert result.location.exists()
        assert result.location.parent == tmp_path

    def test_same_timestamp_keeps_both_files(
        self, sample_resume, minimal_resume, tmp_path, fixed_now
    ):
        saver = DirectorySaver(tmp_path)
        first = export_resume_to_docx(sample_resume, saver=saver, now=fixed_now)
        second = export_resume_to_docx(minimal_resume, saver=saver, now=fixed_now)

        assert first.ok and second.ok
        assert first.location != second.location
        assert len(list(tmp_path.glob("*.docx"))) == 2
        assert first.location.read_bytes() == first.artifact.data
        assert second.location.read_bytes() == second.artifact.data

    def test_works_on_a_copy(self, sample_resume, monkeypatch):
        seen = []
        original = compiler.compile_resume

        def capture(resume, config=None):
            seen.append(resume)
            return original(resume, config)

        monkeypatch.setattr(compiler, "compile_resume", capture)
        export_resume_to_docx(sample_resume)
        assert seen[0] is not sample_resume
        assert seen[0] == sample_resume

    def test_repeated_exports_are_independent(self, sample_resume, tmp_path):
        saver = DirectorySaver(tmp_path)
        first = export_resume_to_docx(sample_resume, saver=saver)
        second = export_resume_to_docx(sample_resume, saver=saver)
        assert first.ok and second.ok
        assert first.location != second.location
        assert len(list(tmp_path.iterdir())) == 2


class TestExportResumeAsync:
    @pytest.mark.asyncio
    async def test_async_export(self, sample_resume, fixed_now):
        seen: list[ExportResult] = []
        result = await export_resume_async(sample_resume, notify=seen.append, now=fixed_now)
        assert result.ok
        assert seen == [result]

    @pytest.mark.asyncio
    async def test_caller_edits_do_not_leak(self, sample_resume, fixed_now):
        task = asyncio.ensure_future(export_resume_async(sample_resume, now=fixed_now))
        await asyncio.sleep(0)
        sample_resume.contact.full_name = "Changed Name"
        result = await task
        assert result.ok
        assert b"Changed Name" not in _document_xml(result.artifact.data)

    @pytest.mark.asyncio
    async def test_concurrent_exports(self, sample_resume, minimal_resume, tmp_path, fixed_now):
        saver = DirectorySaver(tmp_path)
        results = await asyncio.gather(
            export_resume_async(sample_resume, saver=saver, now=fixed_now),
            export_resume_async(
                minimal_resume, saver=saver, now=fixed_now.replace(microsecond=0)
            ),
        )
        assert all(r.ok for r in results)
        assert results[0].location != results[1].location
