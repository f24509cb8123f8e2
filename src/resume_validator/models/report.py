"""Aggregated result of a validation run."""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel

from resume_validator.models.diagnostic import Diagnostic, Severity


class ValidationReport(BaseModel):
    errors: list[Diagnostic] = []
    warnings: list[Diagnostic] = []
    info: list[Diagnostic] = []

    @classmethod
    def from_diagnostics(cls, diagnostics: Iterable[Diagnostic]) -> ValidationReport:
        """Group diagnostics by severity, keeping emission order in each group."""
        groups: dict[Severity, list[Diagnostic]] = {s: [] for s in Severity}
        for diagnostic in diagnostics:
            groups[diagnostic.severity].append(diagnostic)
        return cls(
            errors=groups[Severity.ERROR],
            warnings=groups[Severity.WARNING],
            info=groups[Severity.INFO],
        )

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @property
    def info_count(self) -> int:
        return len(self.info)

    @property
    def passed(self) -> bool:
        # Warnings and info never affect the outcome.
        return not self.errors

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1
