"""CLI interface using typer + rich."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from resume_compiler.assembler import assemble
from resume_compiler.compiler import compile_resume, export_resume_to_docx
from resume_compiler.config import AppConfig, load_config
from resume_compiler.exporter import DirectorySaver
from resume_compiler.models.blocks import Body, HeaderBlock, Heading, TwoColumnLine
from resume_compiler.models.resume import ResumeRecord
from resume_compiler.parsers.record_loader import load_resume

app = typer.Typer(
    name="resume-compiler",
    help="Compile resume records into .docx documents",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _load(record: Path, config_path: Path | None) -> tuple[ResumeRecord, AppConfig]:
    config = load_config(config_path)
    try:
        resume = load_resume(record)
    except FileNotFoundError:
        console.print(f"[red]Resume record not found: {record}[/red]")
        raise typer.Exit(1)
    except (ValueError, ValidationError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid resume record {record}:[/red]\n{e}")
        raise typer.Exit(1)
    return resume, config


@app.command()
def export(
    record: Path = typer.Argument(help="Resume record (.json/.yaml)"),
    out_dir: Path = typer.Option(None, "--out-dir", "-o", help="Output directory"),
    config_path: Path = typer.Option(None, "--config", "-c", help="config.yaml path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Compile a resume record and save it as a .docx file."""
    _setup_logging(verbose)
    resume, config = _load(record, config_path)
    target_dir = out_dir or config.export.resolved_output_dir

    if verbose:
        console.print(f"[dim]Record: {record}[/dim]")
        console.print(f"[dim]Output: {target_dir}[/dim]")

    result = export_resume_to_docx(resume, config=config, saver=DirectorySaver(target_dir))
    if not result.ok:
        console.print(f"[red]Failed to generate Word document: {result.error}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Saved: {result.location}[/green]")


@app.command()
def preview(
    record: Path = typer.Argument(help="Resume record (.json/.yaml)"),
    config_path: Path = typer.Option(None, "--config", "-c", help="config.yaml path"),
) -> None:
    """Show the assembled document blocks without writing a file."""
    resume, config = _load(record, config_path)
    blocks = assemble(resume, config.text)

    table = Table(title="Document blocks")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Block")
    table.add_column("Content")
    table.add_column("Right", justify="right")

    for i, block in enumerate(blocks, 1):
        if isinstance(block, HeaderBlock):
            table.add_row(str(i), "header", f"[bold]{block.name}[/bold]\n{block.contact_text()}", "")
        elif isinstance(block, Heading):
            table.add_row(str(i), "heading", f"[bold]{block.text.upper()}[/bold]", "")
        elif isinstance(block, TwoColumnLine):
            table.add_row(str(i), "two-column", block.left_text, block.right)
        elif isinstance(block, Body):
            lines = [
                f"• {line.text}" if line.kind == "bullet" else line.text
                for line in block.lines
            ]
            table.add_row(str(i), "body", "\n".join(lines), "")

    console.print(table)


@app.command()
def outline(
    record: Path = typer.Argument(help="Resume record (.json/.yaml)"),
    config_path: Path = typer.Option(None, "--config", "-c", help="config.yaml path"),
) -> None:
    """Print the compiled document text, one paragraph per line."""
    resume, config = _load(record, config_path)
    model = compile_resume(resume, config)
    for para in model.paragraphs:
        prefix = "• " if para.bullet_level is not None else ""
        console.print(prefix + para.text.replace("\t", "    "), markup=False, highlight=False)


if __name__ == "__main__":
    app()
