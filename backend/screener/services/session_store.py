"""
Session Store — in-memory home for screening sessions.

Sessions live for the life of the process. Nothing in the screening core
deletes them; clear_sessions() exists for operators and tests.
"""

from __future__ import annotations

import logging
import uuid

from screener.models.chat_models import Session
from screener.models.resume_models import ResumeFacts

logger = logging.getLogger(__name__)

_sessions: dict[str, Session] = {}


def create_session(
    *,
    facts: ResumeFacts,
    file_name: str,
    file_hash: str | None = None,
) -> Session:
    """Open a new session for an accepted resume."""
    session = Session(
        id=str(uuid.uuid4()),
        facts=facts,
        file_name=file_name,
        file_hash=file_hash,
    )
    _sessions[session.id] = session
    logger.info(f"Created session {session.id} for {file_name} ({facts.candidate_name})")
    return session


def get_session(session_id: str) -> Session | None:
    return _sessions.get(session_id)


def list_sessions() -> list[Session]:
    return list(_sessions.values())


def clear_sessions() -> int:
    """Drop all sessions. Returns count cleared."""
    count = len(_sessions)
    _sessions.clear()
    return count
