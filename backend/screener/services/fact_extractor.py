"""
Fact Extractor — rule-based resume parsing.

Responsibilities:
  • Scan decoded resume text for controlled-vocabulary skills (whole document,
    then the first "Skills" section)
  • Collect experience and education lines with loose keyword patterns
  • Guess the candidate name from the first few lines
  • Merge these facts with an LLM-produced ResumeFacts when one is available

Everything here is synchronous and side-effect free apart from logging.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from screener.models.resume_models import ResumeFacts, UNKNOWN_CANDIDATE
from screener.utils.skill_vocabulary import get_vocabulary, normalize_vocabulary

logger = logging.getLogger(__name__)


class EmptyDocumentError(ValueError):
    """Raised when the document text is empty or whitespace-only."""


# ── Patterns ─────────────────────────────────────────────────────────────────

ROLE_KEYWORDS = (
    "engineer", "developer", "manager", "analyst", "consultant", "intern",
    "associate", "lead", "senior", "junior", "specialist", "support",
    "administrator",
)

DEGREE_KEYWORDS = (
    "bachelor", "bs", "ms", "phd", "master", "mba", "diploma", "certificate",
    "degree",
)

INSTITUTION_KEYWORDS = ("university", "college", "institute", "school", "academy")

NAME_STOPWORDS = ("resume", "cv", "curriculum", "vitae", "profile", "contact")

# Heading, then a lazy capture up to a blank line or a line opening with a capital.
# The capital-letter test stays case-sensitive even though the heading is not.
_SKILLS_SECTION_RE = re.compile(
    r"(?:skills|technical skills|key skills)[:\n](.*?)(?=\n\n|(?-i:\n[A-Z]))",
    re.IGNORECASE | re.DOTALL,
)

_EXPERIENCE_RE = re.compile(
    rf"(?:{'|'.join(ROLE_KEYWORDS)})\s*[\w\s]*"
    r"(?:\d{4}\s*-\s*\d{4}|\d{4}\s*-\s*present|\d{4})",
    re.IGNORECASE,
)

_EDUCATION_RE = re.compile(
    rf"(?:{'|'.join(DEGREE_KEYWORDS)})\s*(?:in|of)?\s*[\w\s]*"
    rf"(?:{'|'.join(INSTITUTION_KEYWORDS)})?",
    re.IGNORECASE,
)

_NAME_WORD_RE = re.compile(r"^(?:[A-Z][a-z]+|[A-Z][a-z]*[-'][A-Z][a-z]+)$")

NAME_SCAN_LINES = 10
NAME_MAX_LINE_LENGTH = 50


# ── Public API ───────────────────────────────────────────────────────────────


def extract(text: str, vocabulary: Iterable[str] | None = None) -> ResumeFacts:
    """Extract name, skills, experience and education from resume text.

    Args:
        text:       Plain text already decoded from the document.
        vocabulary: Skill terms to look for. Defaults to the configured
                    controlled vocabulary.

    Raises:
        EmptyDocumentError: if ``text`` is empty or whitespace-only.
    """
    if not text or not text.strip():
        raise EmptyDocumentError("Resume text is empty")

    terms = get_vocabulary() if vocabulary is None else normalize_vocabulary(vocabulary)

    # Strategies are unioned; a later strategy never removes an earlier hit
    skills = _scan_vocabulary(text, terms)
    logger.debug(f"Vocabulary scan: {skills}")

    section = _find_skills_section(text)
    if section is None:
        logger.debug("No skills section found")
    else:
        section_skills = _scan_vocabulary(section, terms)
        logger.debug(f"Skills section scan: {section_skills}")
        skills.extend(s for s in section_skills if s not in skills)

    experience = find_experience_entries(text)
    education = find_education_entries(text)
    name = guess_candidate_name(text)

    facts = ResumeFacts(
        candidate_name=name,
        skills=tuple(skills),
        experience_entries=tuple(experience),
        education_entries=tuple(education),
        source_text=text,
    )
    logger.info(
        f"Extracted facts: name={facts.candidate_name!r} skills={len(facts.skills)} "
        f"experience={len(facts.experience_entries)} education={len(facts.education_entries)}"
    )
    return facts


def merge_facts(extracted: ResumeFacts, ai_facts: ResumeFacts) -> ResumeFacts:
    """
    Combine rule-based facts with an LLM extraction.

      • name: the LLM's, unless blank
      • skills: union of both, case-insensitive, sorted
      • experience / education: the LLM's lists as-is
    """
    name = ai_facts.candidate_name.strip() or extracted.candidate_name
    skills = sorted({s.strip().lower() for s in (*extracted.skills, *ai_facts.skills) if s.strip()})

    return ResumeFacts(
        candidate_name=name,
        skills=tuple(skills),
        experience_entries=ai_facts.experience_entries,
        education_entries=ai_facts.education_entries,
        source_text=extracted.source_text or ai_facts.source_text,
    )


# ── Strategies ───────────────────────────────────────────────────────────────


def _scan_vocabulary(text: str, terms: tuple[str, ...]) -> list[str]:
    """Return every term that occurs in text, in vocabulary order."""
    lower = text.lower()
    return [term for term in terms if term in lower]


def _find_skills_section(text: str) -> str | None:
    """Return the body of the first Skills section, or None."""
    match = _SKILLS_SECTION_RE.search(text)
    return match.group(1) if match else None


def find_experience_entries(text: str) -> list[str]:
    """Return role-keyword-to-year spans, trimmed, in document order."""
    return [m.group(0).strip() for m in _EXPERIENCE_RE.finditer(text)]


def find_education_entries(text: str) -> list[str]:
    """Return degree-keyword spans, trimmed, in document order."""
    return [m.group(0).strip() for m in _EDUCATION_RE.finditer(text)]


def guess_candidate_name(text: str) -> str:
    """First short, capitalized 2-4 word line near the top, else a placeholder."""
    for line in text.splitlines()[:NAME_SCAN_LINES]:
        stripped = line.strip()
        if not stripped or len(stripped) > NAME_MAX_LINE_LENGTH:
            continue
        lower = stripped.lower()
        if any(word in lower for word in NAME_STOPWORDS):
            continue

        words = [w for w in stripped.split() if len(w) > 1]
        if not 2 <= len(words) <= 4:
            continue
        if all(_NAME_WORD_RE.match(w) for w in words):
            return " ".join(stripped.split())

    return UNKNOWN_CANDIDATE
