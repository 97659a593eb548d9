"""
Skill vocabulary — the controlled list of terms the extractor looks for.

The built-in list can be replaced by a JSON file (a flat list of strings)
named in settings.skill_vocabulary_file. The file is read on first use and
cached for the life of the process.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from screener.config import settings

logger = logging.getLogger(__name__)

DEFAULT_SKILL_VOCABULARY: tuple[str, ...] = (
    "python", "javascript", "sql", "java", "react", "node.js", "html", "css",
    "typescript", "angular", "vue", "mongodb", "mysql", "postgresql", "aws",
    "docker", "kubernetes", "git", "linux", "c++", "c#", "php", "ruby",
    "excel", "tableau", "power bi", "matlab", "tensorflow", "pytorch",
    "agile", "scrum", "jira", "jenkins", "azure", "gcp", "graphql", "rest",
    "communication", "teamwork", "problem solving", "leadership", "management",
    "customer service", "technical support", "data analysis", "project management",
)

# Built on first call, cached forever after
_loaded: tuple[str, ...] | None = None


def _load(path: str | None) -> tuple[str, ...]:
    """Read the override file, falling back to the built-in list."""
    if not path:
        return DEFAULT_SKILL_VOCABULARY
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning(f"Could not load skill vocabulary from {path}: {e}")
        return DEFAULT_SKILL_VOCABULARY
    if not isinstance(raw, list):
        logger.warning(f"Skill vocabulary file {path} must hold a JSON list; using defaults")
        return DEFAULT_SKILL_VOCABULARY
    terms = normalize_vocabulary(str(t) for t in raw)
    logger.info(f"Loaded {len(terms)} skill terms from {path}")
    return terms


def get_vocabulary() -> tuple[str, ...]:
    """Return the active controlled vocabulary."""
    global _loaded
    if _loaded is None:
        _loaded = _load(settings.skill_vocabulary_file)
    return _loaded


def reset_vocabulary() -> None:
    """Forget the cached vocabulary so the next call re-reads settings."""
    global _loaded
    _loaded = None


def normalize_vocabulary(terms: Iterable[str]) -> tuple[str, ...]:
    """
    Lowercase, strip and dedupe terms.

    Sequences keep their order. Sets are sorted first so discovery order does
    not depend on string hashing between runs.
    """
    if isinstance(terms, (set, frozenset)):
        terms = sorted(terms, key=str.lower)
    seen: dict[str, None] = {}
    for term in terms:
        key = term.strip().lower()
        if key:
            seen.setdefault(key, None)
    return tuple(seen)
