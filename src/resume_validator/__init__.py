"""Schema validation for bilingual resume data."""

from resume_validator.build_gate import ResumeValidationError, run_build_gate
from resume_validator.models import Diagnostic, DiagnosticSink, Severity, ValidationReport
from resume_validator.validation import validate_dataset

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "DiagnosticSink",
    "ResumeValidationError",
    "Severity",
    "ValidationReport",
    "run_build_gate",
    "validate_dataset",
]
