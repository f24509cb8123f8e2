"""Diagnostics and the run-scoped sink that collects them."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Diagnostic(BaseModel):
    severity: Severity
    location: str  # e.g. "en/experience.yml [entry 2]"
    message: str

    model_config = ConfigDict(frozen=True)

    @field_validator("location", "message")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


class DiagnosticSink:
    """Append-only, ordered collection of diagnostics for a single run.

    A sink is never shared between runs; emission order is preserved so
    reports stay deterministic.
    """

    def __init__(self) -> None:
        self._items: list[Diagnostic] = []

    def add(self, severity: Severity, location: str, message: str) -> None:
        self._items.append(
            Diagnostic(severity=severity, location=location, message=message)
        )

    def error(self, location: str, message: str) -> None:
        self.add(Severity.ERROR, location, message)

    def warning(self, location: str, message: str) -> None:
        self.add(Severity.WARNING, location, message)

    def info(self, location: str, message: str) -> None:
        self.add(Severity.INFO, location, message)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._items)

    @property
    def error_count(self) -> int:
        return sum(1 for d in self._items if d.severity is Severity.ERROR)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))
