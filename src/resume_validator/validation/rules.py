"""Per-section rules for the resume dataset.

Every rule has the signature ``rule(sink, data, lang)`` and is reached
through ``SECTION_RULES``, keyed by ``SectionKind``.
"""

from __future__ import annotations

from typing import Any, Callable

from resume_validator.models.diagnostic import DiagnosticSink
from resume_validator.models.section import SectionKind, entry_location, section_location
from resume_validator.validation.primitives import (
    validate_date,
    validate_date_or_present,
    validate_date_range,
    validate_durations,
    validate_url,
)

RuleFn = Callable[[DiagnosticSink, Any, str], None]


def _blank(value: Any) -> bool:
    """Absent, or a string that is empty once trimmed."""
    return value is None or not str(value).strip()


def _truthy(value: Any) -> bool:
    return value is not None and value is not False


def _require(sink: DiagnosticSink, entry: dict, context: str, *fields: str) -> None:
    for name in fields:
        if _blank(entry.get(name)):
            sink.error(context, f"Missing '{name}' field")


def _require_active(sink: DiagnosticSink, entry: dict, context: str) -> None:
    # Only presence matters; true and false are both fine.
    if entry.get("active") is None:
        sink.error(context, "Missing 'active' field")


def _entries(data: Any, lang: str, section: SectionKind):
    """Yield ``(location, record)`` for every mapping in a list section."""
    if not isinstance(data, list):
        return
    for idx, entry in enumerate(data):
        if isinstance(entry, dict):
            yield entry_location(lang, section, idx), entry


def _check_url_field(sink: DiagnosticSink, entry: dict, context: str, field_name: str) -> None:
    if not _blank(entry.get(field_name)):
        validate_url(sink, entry[field_name], context, field_name)


# ---------------------------------------------------------------------------
# Shared record shapes
# ---------------------------------------------------------------------------


def _validate_tenure(
    sink: DiagnosticSink, entry: dict, context: str, suggest_location: bool
) -> None:
    """Rule shape shared by experience and volunteering records."""
    _require(sink, entry, context, "company", "position")
    _require_active(sink, entry, context)

    start, end = entry.get("startdate"), entry.get("enddate")
    if not _blank(start) and not _blank(end):
        validate_date(sink, start, context, "startdate")
        validate_date_or_present(sink, end, context, "enddate")
        validate_date_range(sink, start, end, context)
    elif _truthy(entry.get("durations")):
        validate_durations(sink, entry["durations"], context)
    else:
        sink.warning(context, "Missing both 'startdate/enddate' and 'durations' fields")

    # Historical entries are not nagged about their location.
    if suggest_location and entry.get("location") is None and _truthy(entry.get("active")):
        sink.info(context, "Consider adding 'location' field")


def validate_course_entry(sink: DiagnosticSink, entry: dict, context: str) -> None:
    """Rule for a course record, top-level or nested in a certification."""
    _require(sink, entry, context, "name", "issuing_organization", "startdate")
    _require_active(sink, entry, context)

    if not _blank(entry.get("startdate")):
        validate_date(sink, entry["startdate"], context, "startdate")

    if not _blank(entry.get("enddate")):
        validate_date(sink, entry["enddate"], context, "enddate")
        validate_date_range(
            sink, entry.get("startdate"), entry["enddate"], context, "startdate", "enddate"
        )

    # Expiration is checked on its own; it is not ordered against startdate.
    if not _blank(entry.get("expiration")):
        validate_date(sink, entry["expiration"], context, "expiration")

    _check_url_field(sink, entry, context, "credential_url")


# ---------------------------------------------------------------------------
# Section rules
# ---------------------------------------------------------------------------


def validate_header(sink: DiagnosticSink, data: Any, lang: str) -> None:
    if not isinstance(data, dict):
        return
    intro = data.get("intro")
    if intro is not None and not str(intro).strip():
        sink.warning(section_location(lang, SectionKind.HEADER), "intro field is present but empty")


def validate_experience(sink: DiagnosticSink, data: Any, lang: str) -> None:
    for context, entry in _entries(data, lang, SectionKind.EXPERIENCE):
        _validate_tenure(sink, entry, context, suggest_location=True)


def validate_volunteering(sink: DiagnosticSink, data: Any, lang: str) -> None:
    for context, entry in _entries(data, lang, SectionKind.VOLUNTEERING):
        _validate_tenure(sink, entry, context, suggest_location=False)


def validate_education(sink: DiagnosticSink, data: Any, lang: str) -> None:
    for context, entry in _entries(data, lang, SectionKind.EDUCATION):
        _require(sink, entry, context, "degree", "uni", "year", "location")
        _require_active(sink, entry, context)

        if _truthy(entry.get("awards")) and _truthy(entry.get("award")):
            sink.info(
                context,
                "Both 'awards' list and 'award' field are present - both will be displayed",
            )


def validate_skills(sink: DiagnosticSink, data: Any, lang: str) -> None:
    for context, entry in _entries(data, lang, SectionKind.SKILLS):
        _require(sink, entry, context, "skill", "description")
        _require_active(sink, entry, context)


def validate_projects(sink: DiagnosticSink, data: Any, lang: str) -> None:
    for context, entry in _entries(data, lang, SectionKind.PROJECTS):
        # "duration" is free text here, not a date pair.
        _require(sink, entry, context, "project", "role", "duration", "description")
        _require_active(sink, entry, context)
        _check_url_field(sink, entry, context, "url")


def validate_certifications(sink: DiagnosticSink, data: Any, lang: str) -> None:
    for context, entry in _entries(data, lang, SectionKind.CERTIFICATIONS):
        _require(sink, entry, context, "name", "issuing_organization", "issue_date")
        _require_active(sink, entry, context)

        if not _blank(entry.get("issue_date")):
            validate_date(sink, entry["issue_date"], context, "issue_date")

        if not _blank(entry.get("expiration")):
            validate_date(sink, entry["expiration"], context, "expiration")
            validate_date_range(
                sink, entry.get("issue_date"), entry["expiration"], context,
                "issue_date", "expiration",
            )

        _check_url_field(sink, entry, context, "credential_url")

        courses = entry.get("courses")
        if isinstance(courses, list):
            for course_idx, course in enumerate(courses):
                if isinstance(course, dict):
                    validate_course_entry(sink, course, f"{context} > course {course_idx + 1}")


def validate_courses(sink: DiagnosticSink, data: Any, lang: str) -> None:
    for context, entry in _entries(data, lang, SectionKind.COURSES):
        validate_course_entry(sink, entry, context)


def validate_associations(sink: DiagnosticSink, data: Any, lang: str) -> None:
    for context, entry in _entries(data, lang, SectionKind.ASSOCIATIONS):
        _require(sink, entry, context, "organization", "role", "year")
        _require_active(sink, entry, context)
        _check_url_field(sink, entry, context, "url")


def validate_recognitions(sink: DiagnosticSink, data: Any, lang: str) -> None:
    # "year" is free text for recognitions; no date checks.
    for context, entry in _entries(data, lang, SectionKind.RECOGNITIONS):
        _require(sink, entry, context, "award", "organization", "year", "summary")
        _require_active(sink, entry, context)


def validate_interests(sink: DiagnosticSink, data: Any, lang: str) -> None:
    # Interests carry no "active" marker.
    for context, entry in _entries(data, lang, SectionKind.INTERESTS):
        _require(sink, entry, context, "description")


def validate_languages(sink: DiagnosticSink, data: Any, lang: str) -> None:
    for context, entry in _entries(data, lang, SectionKind.LANGUAGES):
        _require(sink, entry, context, "language", "description", "descrp_short")
        _require_active(sink, entry, context)


def validate_links(sink: DiagnosticSink, data: Any, lang: str) -> None:
    for context, entry in _entries(data, lang, SectionKind.LINKS):
        _require(sink, entry, context, "description", "url")
        _require_active(sink, entry, context)
        _check_url_field(sink, entry, context, "url")


SECTION_RULES: dict[SectionKind, RuleFn] = {
    SectionKind.HEADER: validate_header,
    SectionKind.EXPERIENCE: validate_experience,
    SectionKind.EDUCATION: validate_education,
    SectionKind.SKILLS: validate_skills,
    SectionKind.PROJECTS: validate_projects,
    SectionKind.CERTIFICATIONS: validate_certifications,
    SectionKind.COURSES: validate_courses,
    SectionKind.ASSOCIATIONS: validate_associations,
    SectionKind.VOLUNTEERING: validate_volunteering,
    SectionKind.RECOGNITIONS: validate_recognitions,
    SectionKind.INTERESTS: validate_interests,
    SectionKind.LANGUAGES: validate_languages,
    SectionKind.LINKS: validate_links,
}
