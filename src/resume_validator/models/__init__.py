"""Data models for the resume validator."""

from resume_validator.models.diagnostic import Diagnostic, DiagnosticSink, Severity
from resume_validator.models.report import ValidationReport
from resume_validator.models.section import (
    DEFAULT_LANGUAGES,
    SECTION_ORDER,
    SectionKind,
)

__all__ = [
    "DEFAULT_LANGUAGES",
    "Diagnostic",
    "DiagnosticSink",
    "SECTION_ORDER",
    "SectionKind",
    "Severity",
    "ValidationReport",
]
