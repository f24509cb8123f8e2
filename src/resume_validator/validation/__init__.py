"""Validation engine: primitive validators, section rules and traversal."""

from resume_validator.validation.engine import (
    run_validation,
    validate_dataset,
    validate_section,
)
from resume_validator.validation.rules import SECTION_RULES

__all__ = [
    "SECTION_RULES",
    "run_validation",
    "validate_dataset",
    "validate_section",
]
