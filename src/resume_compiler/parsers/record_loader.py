"""Load resume records exported by the web app (JSON or YAML)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from resume_compiler.models.resume import ResumeRecord


def load_resume(file_path: str | Path) -> ResumeRecord:
    """Parse a resume record file (.json, .yaml, .yml).

    A top-level ``resume`` key, as returned by the resume API, is unwrapped.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Resume record not found: {path}")

    suffix = path.suffix.lower()
    raw = path.read_text(encoding="utf-8")
    if suffix == ".json":
        data = json.loads(raw)
    elif suffix in (".yaml", ".yml"):
        data = yaml.safe_load(raw)
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}")

    return parse_resume_data(data)


def parse_resume_data(data: Any) -> ResumeRecord:
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping, got {type(data).__name__}")
    if isinstance(data.get("resume"), dict):
        data = data["resume"]
    return ResumeRecord.model_validate(data)
