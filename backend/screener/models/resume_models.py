from pydantic import BaseModel, ConfigDict, field_validator


UNKNOWN_CANDIDATE = "Unknown Candidate"


class ResumeFacts(BaseModel):
    """Structured facts extracted from a single resume. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    candidate_name: str = UNKNOWN_CANDIDATE
    skills: tuple[str, ...] = ()  # lowercase, discovery order, no duplicates
    experience_entries: tuple[str, ...] = ()
    education_entries: tuple[str, ...] = ()
    source_text: str = ""

    @field_validator("skills", mode="before")
    @classmethod
    def _normalize_skills(cls, value):
        """Lowercase, strip and dedupe skills while keeping first-seen order."""
        seen: dict[str, None] = {}
        for skill in value or ():
            key = str(skill).strip().lower()
            if key:
                seen.setdefault(key, None)
        return tuple(seen)


# ── API Models ──────────────────────────────────────────────────────────────


class ResumeTextRequest(BaseModel):
    """Input for building a session from already-decoded resume text."""

    text: str
    file_name: str = "pasted.txt"
