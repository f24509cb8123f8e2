"""Render a ValidationReport to the terminal with rich."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule

from resume_validator.models.diagnostic import Diagnostic
from resume_validator.models.report import ValidationReport

_GROUPS = (
    # (attribute, title, color, marker)
    ("errors", "VALIDATION ERRORS", "red", "✗"),
    ("warnings", "VALIDATION WARNINGS", "yellow", "⚠"),
    ("info", "VALIDATION SUGGESTIONS", "blue", "ℹ"),
)


def render_banner(console: Console, target: str) -> None:
    console.print()
    console.print("[bold cyan]Resume Validator[/bold cyan]")
    console.print(Rule(style="cyan"))
    console.print(f"Validating data: {escape(target)}")
    console.print()


def _render_group(
    console: Console, title: str, color: str, marker: str, items: list[Diagnostic]
) -> None:
    console.print(
        Panel(f"{title} ({len(items)})", style=color, expand=True),
    )
    console.print()
    for item in items:
        console.print(f"  [{color}]{marker} {escape(item.location)}[/{color}]")
        console.print(f"    → {escape(item.message)}")
        console.print()


def render_report(report: ValidationReport, console: Console, verbose: bool = False) -> None:
    """Print errors, warnings and (when verbose) suggestions, then a summary."""
    console.print()
    for attr, title, color, marker in _GROUPS:
        items = getattr(report, attr)
        if not items:
            continue
        if attr == "info" and not verbose:
            continue
        _render_group(console, title, color, marker, items)

    console.print(Rule(style="cyan"))
    if not report.errors and not report.warnings:
        console.print("[green]✓ VALIDATION SUCCESSFUL[/green]")
        console.print("[green]All resume data files are valid![/green]")
    else:
        console.print(
            f"[yellow]Summary: {report.error_count} error(s), "
            f"{report.warning_count} warning(s)[/yellow]"
        )
        if report.errors:
            console.print("[red]Build would fail with current errors.[/red]")
    console.print(Rule(style="cyan"))
    console.print()
