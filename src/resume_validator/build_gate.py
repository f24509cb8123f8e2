"""Embedded host: validate already-loaded site data during a build.

The build tool calls ``run_build_gate`` once with its data tree; any
error-severity diagnostic halts the build via ``ResumeValidationError``.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Iterable, Mapping

from rich.console import Console

from resume_validator.models.report import ValidationReport
from resume_validator.models.section import DEFAULT_LANGUAGES
from resume_validator.report.renderer import render_report
from resume_validator.sources import SnapshotSource
from resume_validator.validation.engine import run_validation

logger = logging.getLogger(__name__)

VERBOSE_ENV = "RESUME_VALIDATOR_VERBOSE"


class ResumeValidationError(RuntimeError):
    """Raised when the dataset has at least one error."""

    def __init__(self, report: ValidationReport):
        self.report = report
        super().__init__(
            f"Resume validation failed with {report.error_count} error(s). "
            "Fix the issues above and rebuild."
        )


def run_build_gate(
    site_data: Mapping[str, Any] | None,
    languages: Iterable[str] = DEFAULT_LANGUAGES,
    console: Console | None = None,
    verbose: bool | None = None,
) -> ValidationReport:
    """Validate ``site_data`` and raise if the build must stop.

    Suggestions are shown when ``verbose`` is true or, if it is not given,
    when RESUME_VALIDATOR_VERBOSE is set to a non-empty value.
    """
    if verbose is None:
        verbose = bool(os.environ.get(VERBOSE_ENV))
    logger.info("Resume Validator: Starting validation...")

    sink = run_validation(SnapshotSource(site_data), languages)
    report = ValidationReport.from_diagnostics(sink)

    render_report(report, console or Console(), verbose=verbose)

    if not report.passed:
        raise ResumeValidationError(report)

    logger.info(
        "Resume Validator: passed with %d warning(s)", report.warning_count
    )
    return report
