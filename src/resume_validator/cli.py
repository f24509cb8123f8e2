"""CLI interface using typer + rich."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from resume_validator.config import load_config
from resume_validator.models.report import ValidationReport
from resume_validator.report.renderer import render_banner, render_report
from resume_validator.sources import DirectorySource
from resume_validator.validation.engine import run_validation

app = typer.Typer(
    name="resume-validator",
    help="Validate YAML resume data files",
)
console = Console()


def _parse_languages(value: str | None) -> list[str] | None:
    if value is None:
        return None
    codes = [code.strip() for code in value.split(",") if code.strip()]
    return codes or None


@app.command()
def check(
    data_dir: Path = typer.Option(
        None,
        "--data-dir",
        "-d",
        envvar="RESUME_DATA_DIR",
        help="Path to _data directory (one subdirectory per language)",
    ),
    languages: str = typer.Option(
        None, "--languages", "-l", help="Comma-separated language codes (default: en,ar)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show info-level suggestions"),
    config_path: Path = typer.Option(None, "--config", "-c", help="Config YAML path"),
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"
    ),
) -> None:
    """Validate resume data files and exit 1 on any error."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(config_path)
    except (TypeError, ValueError, yaml.YAMLError) as exc:
        console.print(f"[red]Invalid config: {escape(str(exc))}[/red]")
        raise typer.Exit(1)

    if data_dir is None:
        data_dir = config.resolved_data_dir
    if data_dir is None:
        console.print("[red]Error: --data-dir is required[/red]")
        console.print("Usage: resume-validator --data-dir /path/to/_data")
        raise typer.Exit(1)
    if not data_dir.is_dir():
        console.print(f"[red]Error: Data directory not found: {data_dir}[/red]")
        raise typer.Exit(1)

    langs = _parse_languages(languages) or list(config.languages)
    verbose = verbose or config.verbose

    source = DirectorySource(data_dir)
    render_banner(console, str(data_dir))
    for lang in langs:
        if source.has_language(lang):
            console.print(f"[blue]▶[/blue] Validating {lang.upper()} files...")
        else:
            console.print(f"[yellow]⚠[/yellow] Skipping {lang}: directory not found")

    sink = run_validation(source, langs)
    report = ValidationReport.from_diagnostics(sink)
    render_report(report, console, verbose=verbose)

    raise typer.Exit(report.exit_code)


if __name__ == "__main__":
    app()
