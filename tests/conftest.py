"""Shared test fixtures."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from resume_validator.models.diagnostic import DiagnosticSink


@pytest.fixture
def sink() -> DiagnosticSink:
    return DiagnosticSink()


@pytest.fixture
def valid_experience() -> dict:
    return {
        "company": "Acme Corp",
        "position": "Backend Engineer",
        "startdate": "2019-03-01",
        "enddate": "present",
        "location": "Riyadh",
        "active": True,
    }


@pytest.fixture
def valid_certification() -> dict:
    return {
        "name": "Cloud Architect",
        "issuing_organization": "Cloud Co",
        "issue_date": date(2021, 5, 1),
        "expiration": "2024-05-01",
        "credential_url": "https://example.com/cred/123",
        "active": True,
    }


@pytest.fixture
def valid_snapshot(valid_experience, valid_certification) -> dict:
    """A clean two-language dataset that yields no errors or warnings."""
    en = {
        "header": {"intro": "Engineer focused on data platforms."},
        "experience": [valid_experience],
        "education": [
            {
                "degree": "BSc Computer Science",
                "uni": "King Saud University",
                "year": "2015 - 2019",
                "location": "Riyadh",
                "active": True,
            }
        ],
        "skills": [{"skill": "Python", "description": "Services and tooling", "active": True}],
        "projects": [
            {
                "project": "resume-site",
                "role": "Author",
                "duration": "2022",
                "description": "Bilingual resume theme",
                "url": "https://github.com/example/resume-site",
                "active": True,
            }
        ],
        "certifications": [valid_certification],
        "interests": [{"description": "Chess"}],
        "links": [{"description": "Blog", "url": "https://blog.example.com", "active": True}],
    }
    ar = {
        "experience": [dict(valid_experience, company="شركة أكمي", position="مهندس")],
        "languages": [
            {
                "language": "العربية",
                "description": "اللغة الأم",
                "descrp_short": "أم",
                "active": True,
            }
        ],
    }
    return {"en": en, "ar": ar}


def _write_yaml(root: Path, lang: str, section: str, text: str) -> Path:
    path = root / lang / f"{section}.yml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def write_yaml():
    return _write_yaml


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """On-disk _data tree with one error (missing position) and one warning."""
    root = tmp_path / "_data"
    _write_yaml(
        root,
        "en",
        "experience",
        "- company: Acme\n"
        "  position: Engineer\n"
        "  startdate: 2020-01-01\n"
        "  enddate: present\n"
        "  location: Remote\n"
        "  active: true\n"
        "- company: Beta\n"
        "  startdate: 2018-01-01\n"
        "  enddate: 2019-06-30\n"
        "  active: false\n",
    )
    _write_yaml(
        root,
        "en",
        "links",
        "- description: Mail\n  url: mailto:me@example.com\n  active: true\n",
    )
    (root / "ar").mkdir(parents=True)
    return root
