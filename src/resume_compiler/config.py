"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass(frozen=True)
class StyleSheet:
    """Fixed look of every compiled resume.

    Sizes are in points, margins in inches, tab positions in twips
    (1/20 pt).
    """

    font_name: str = "Times New Roman"
    body_size: float = 11
    heading_size: float = 12
    name_size: float = 16
    page_width_in: float = 8.5
    page_height_in: float = 11
    margin_in: float = 0.5
    line_spacing: float = 1.15
    heading_space_before: float = 12
    heading_space_after: float = 0
    entry_space_before: float = 6
    paragraph_space_after: float = 0
    tab_stop_twips: int = 10800
    border_size: int = 6  # eighths of a point
    border_space: int = 1
    border_color: str = "auto"
    link_color: str = "0563C1"

    def __post_init__(self) -> None:
        for name in ("body_size", "heading_size", "name_size", "line_spacing", "tab_stop_twips"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if not 0 <= self.margin_in < min(self.page_width_in, self.page_height_in) / 2:
            raise ValueError(f"margin_in out of range: {self.margin_in}")


@dataclass(frozen=True)
class FallbackText:
    """Every literal the assembler may substitute or emit."""

    name: str = "Your Name"
    missing_start: str = "N/A"
    ongoing_end: str = "Present"
    contact_separator: str = " • "
    date_separator: str = " - "
    summary_heading: str = "Summary"
    experience_heading: str = "Work Experience"
    education_heading: str = "Education"
    projects_heading: str = "Projects"
    skills_heading: str = "Skills"
    certifications_heading: str = "Licenses & Certifications"
    awards_heading: str = "Honors & Awards"
    credential_prefix: str = "Credential ID: "
    issuer_prefix: str = "Issued by: "


@dataclass(frozen=True)
class ExportConfig:
    output_dir: str = "./output"
    filename_prefix: str = "Resume"
    timestamp_format: str = "%Y-%m-%dT%H-%M-%S-%f"

    def __post_init__(self) -> None:
        if any(ch in self.timestamp_format for ch in '/\\:'):
            raise ValueError(f"timestamp_format must be filesystem-safe: {self.timestamp_format!r}")

    @property
    def resolved_output_dir(self) -> Path:
        return Path(self.output_dir).expanduser()


@dataclass(frozen=True)
class AppConfig:
    style: StyleSheet = field(default_factory=StyleSheet)
    text: FallbackText = field(default_factory=FallbackText)
    export: ExportConfig = field(default_factory=ExportConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    return AppConfig(
        style=StyleSheet(**raw.get("style", {})),
        text=FallbackText(**raw.get("text", {})),
        export=ExportConfig(**raw.get("export", {})),
    )
