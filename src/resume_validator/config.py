"""Validator configuration loaded from resume-validator.yaml."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from resume_validator.models.section import DEFAULT_LANGUAGES

CONFIG_FILENAME = "resume-validator.yaml"


@dataclass(frozen=True)
class ValidatorConfig:
    languages: tuple[str, ...] = DEFAULT_LANGUAGES
    verbose: bool = False
    data_dir: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.languages, str) or not isinstance(self.languages, (list, tuple)):
            raise ValueError(
                f"languages must be a list of language codes, got {self.languages!r}"
            )
        # YAML gives lists; keep the config hashable and immutable.
        object.__setattr__(self, "languages", tuple(self.languages))
        if not self.languages:
            raise ValueError("languages must list at least one language code")
        for code in self.languages:
            if not isinstance(code, str) or not code.strip():
                raise ValueError(f"languages contains an invalid code: {code!r}")

    @property
    def resolved_data_dir(self) -> Path | None:
        if self.data_dir is None:
            return None
        return Path(self.data_dir).expanduser()


def load_config(path: str | Path | None = None) -> ValidatorConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidate = Path.cwd() / CONFIG_FILENAME
        if candidate.exists():
            path = candidate

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"config file must contain a mapping, got {type(raw).__name__}")
    section = raw.get("validator") or {}
    if not isinstance(section, dict):
        raise ValueError(f"validator must be a mapping, got {type(section).__name__}")

    return ValidatorConfig(**section)
