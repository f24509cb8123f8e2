"""Traversal driver: languages x sections -> diagnostics."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from resume_validator.models.diagnostic import Diagnostic, DiagnosticSink
from resume_validator.models.section import (
    DEFAULT_LANGUAGES,
    SECTION_ORDER,
    SectionKind,
    section_location,
)
from resume_validator.sources import SectionLoadError, SnapshotSource
from resume_validator.validation.rules import SECTION_RULES

logger = logging.getLogger(__name__)


def validate_section(
    section: SectionKind | str,
    data: Any,
    lang: str,
    sink: DiagnosticSink,
) -> None:
    """Run the rule for one section, turning any fault into a single error."""
    if data is None:
        return

    name = section.value if isinstance(section, SectionKind) else section
    location = section_location(lang, name)

    try:
        kind = SectionKind(name)
    except ValueError:
        kind = None
    rule = SECTION_RULES.get(kind) if kind is not None else None
    if rule is None:
        sink.info(location, "No validation rules defined for this section")
        return

    logger.debug("Validating %s", location)
    try:
        rule(sink, data, lang)
    except Exception as exc:
        logger.warning("Rule for %s failed", location, exc_info=True)
        sink.error(location, f"Validation error: {exc}")


def run_validation(
    source: Any,
    languages: Iterable[str] = DEFAULT_LANGUAGES,
    sink: DiagnosticSink | None = None,
) -> DiagnosticSink:
    """Validate every (language, section) pair of ``source`` into ``sink``.

    ``source`` is a ``SnapshotSource``/``DirectorySource`` or a plain
    ``{lang: {section: data}}`` mapping. Languages the source lacks are
    skipped. Sections are visited in ``SECTION_ORDER``.
    """
    if isinstance(source, Mapping):
        source = SnapshotSource(source)
    if sink is None:
        sink = DiagnosticSink()

    for lang in languages:
        if not source.has_language(lang):
            logger.warning("Skipping %s: no data found", lang)
            continue

        for kind in SECTION_ORDER:
            try:
                data = source.load(lang, kind)
            except SectionLoadError as exc:
                sink.error(section_location(lang, kind), str(exc))
                continue
            validate_section(kind, data, lang, sink)

    return sink


def validate_dataset(
    source: Any,
    languages: Iterable[str] = DEFAULT_LANGUAGES,
) -> list[Diagnostic]:
    """Pure entry point: dataset in, ordered diagnostics out."""
    return run_validation(source, languages).diagnostics
