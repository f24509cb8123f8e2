"""Where section data comes from: an in-memory snapshot or a YAML directory tree.

A source exposes ``has_language(lang)`` and ``load(lang, kind)``. ``load``
returns None for an absent section and raises ``SectionLoadError`` when the
section exists but cannot be read.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from resume_validator.models.section import SectionKind

logger = logging.getLogger(__name__)


class SectionLoadError(Exception):
    """Raised when a section document exists but cannot be loaded."""


class SnapshotSource:
    """Already-loaded data shaped ``{lang: {section: data}}``."""

    def __init__(self, data: Mapping[str, Any] | None):
        self._data = data or {}

    def has_language(self, lang: str) -> bool:
        return isinstance(self._data.get(lang), Mapping)

    def load(self, lang: str, kind: SectionKind) -> Any:
        partition = self._data.get(lang)
        if not isinstance(partition, Mapping):
            return None
        return partition.get(kind.value)


class DirectorySource:
    """Reads ``<root>/<lang>/<section>.yml`` files on demand."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def path_for(self, lang: str, kind: SectionKind) -> Path:
        return self.root / lang / f"{kind.value}.yml"

    def has_language(self, lang: str) -> bool:
        return (self.root / lang).is_dir()

    def load(self, lang: str, kind: SectionKind) -> Any:
        path = self.path_for(lang, kind)
        if not path.exists():
            return None

        logger.debug("Loading %s", path)
        try:
            with open(path, encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise SectionLoadError(f"YAML syntax error: {exc}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise SectionLoadError(f"Error loading file: {exc}") from exc
