"""Section kinds of the resume dataset."""

from __future__ import annotations

from enum import Enum


class SectionKind(str, Enum):
    HEADER = "header"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    CERTIFICATIONS = "certifications"
    COURSES = "courses"
    ASSOCIATIONS = "associations"
    VOLUNTEERING = "volunteering"
    RECOGNITIONS = "recognitions"
    INTERESTS = "interests"
    LANGUAGES = "languages"
    LINKS = "links"


# Report order within a language follows this list.
SECTION_ORDER: tuple[SectionKind, ...] = tuple(SectionKind)

DEFAULT_LANGUAGES: tuple[str, ...] = ("en", "ar")


def section_location(lang: str, section: str | SectionKind) -> str:
    name = section.value if isinstance(section, SectionKind) else section
    return f"{lang}/{name}.yml"


def entry_location(lang: str, section: str | SectionKind, index: int) -> str:
    """Location of the ``index``-th (0-based) record of a list section."""
    return f"{section_location(lang, section)} [entry {index + 1}]"
