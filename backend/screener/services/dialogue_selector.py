"""
Dialogue Selector — choose the next screening question.

A fixed cascade of rules is tried in order and the first match wins:

  1. gratitude          "thank you" / "thanks"
  2. compensation       "salary" / "compensation"
  3. timeline           "when" and "hear"
  4. skill follow-up    message names one of the candidate's skills
  5. role probe         "position" / "job" / "role"
  6. terseness          fewer than 10 words
  7. skill rotation     first skill the agent has not asked about yet
  8. fallback           candidate has no skills

"Already asked about" is recomputed from the agent's own past messages on
every call; nothing is stored between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Sequence

from screener.models.chat_models import Sender
from screener.models.resume_models import ResumeFacts

logger = logging.getLogger(__name__)

TERSE_WORD_LIMIT = 10

# Canned replies avoid words that embed vocabulary terms ("discuss" holds "css",
# "interest" holds "rest") so they never mark a skill as asked about by accident.
GRATITUDE_REPLY = (
    "You're welcome! Feel free to ask me anything else about the position or the company."
)
COMPENSATION_REPLY = (
    "Compensation is handled by our HR team later in the process. "
    "What are your salary expectations for this position?"
)
TIMELINE_REPLY = (
    "Thank you for your patience. Candidates typically hear back from us "
    "within 5-7 business days."
)
SKILL_FOLLOW_UP_REPLY = "Great! Could you describe a specific project where you used {skill}?"
ROLE_REPLY = "What motivated you to apply for this position, and what do you hope to achieve in the role?"
TERSE_REPLY = (
    "Could you elaborate a bit more? Specific examples would help me understand your background."
)
SKILL_ROTATION_REPLY = (
    "I noticed {skill} on your resume. Could you walk me through how you have used it in your work?"
)
CLOSING_REPLY = (
    "Thanks for sharing all of that! Is there anything else you would like to know "
    "about the company or the role?"
)
FALLBACK_REPLY = "Could you tell me more about what you are looking for in your next role?"


# ── Public API ───────────────────────────────────────────────────────────────


def next_reply(facts: ResumeFacts, turns: Sequence[Any], incoming_message: str) -> str:
    """Return the agent's reply to ``incoming_message``.

    ``turns`` is the session history before this message. The caller appends
    the user message and then this reply to it afterwards.
    """
    rule, reply = _select(facts, turns, incoming_message)
    logger.debug(f"Dialogue rule fired: {rule}")
    return reply


def discussed_skills(facts: ResumeFacts, turns: Sequence[Any]) -> set[str]:
    """Skills named in any earlier agent message (case-insensitive)."""
    agent_texts = [
        _turn_text(t).lower() for t in turns if _turn_sender(t) == Sender.AGENT
    ]
    return {skill for skill in facts.skills if any(skill in text for text in agent_texts)}


# ── Cascade ──────────────────────────────────────────────────────────────────


def _select(facts: ResumeFacts, turns: Sequence[Any], message: str) -> tuple[str, str]:
    lower = message.lower()

    if "thank you" in lower or "thanks" in lower:
        return "gratitude", GRATITUDE_REPLY

    if "salary" in lower or "compensation" in lower:
        return "compensation", COMPENSATION_REPLY

    if "when" in lower and "hear" in lower:
        return "timeline", TIMELINE_REPLY

    mentioned = next((s for s in facts.skills if s.lower() in lower), None)
    if mentioned is not None:
        return "skill_follow_up", SKILL_FOLLOW_UP_REPLY.format(skill=mentioned)

    if any(word in lower for word in ("position", "job", "role")):
        return "role", ROLE_REPLY

    if len(message.split()) < TERSE_WORD_LIMIT:
        return "terse", TERSE_REPLY

    if facts.skills:
        asked = discussed_skills(facts, turns)
        pending = [s for s in facts.skills if s not in asked]
        if pending:
            return "skill_rotation", SKILL_ROTATION_REPLY.format(skill=pending[0])
        return "closing", CLOSING_REPLY

    return "fallback", FALLBACK_REPLY


# ── Helpers ──────────────────────────────────────────────────────────────────


def _turn_sender(turn: Any) -> Sender | None:
    """Sender of a turn, or None when it is missing or unrecognised."""
    raw = turn.get("sender") if isinstance(turn, Mapping) else getattr(turn, "sender", None)
    try:
        return Sender(raw) if raw is not None else None
    except ValueError:
        return None


def _turn_text(turn: Any) -> str:
    raw = turn.get("text") if isinstance(turn, Mapping) else getattr(turn, "text", None)
    return raw if isinstance(raw, str) else ""
