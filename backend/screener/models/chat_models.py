from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from screener.models.resume_models import ResumeFacts


class Sender(str, Enum):
    USER = "user"
    AGENT = "agent"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ConversationTurn(BaseModel):
    """A single message in a screening conversation."""

    sender: Sender
    text: str
    timestamp: datetime = Field(default_factory=_utcnow)


class Session(BaseModel):
    """A candidate's extracted facts plus the running chat log."""

    id: str
    facts: ResumeFacts
    turns: list[ConversationTurn] = []
    file_name: str
    file_hash: Optional[str] = None
    created_at: datetime = Field(default_factory=_utcnow)


# ── API Models ──────────────────────────────────────────────────────────────


class SessionCreated(BaseModel):
    """Response after a resume has been accepted."""

    session_id: str
    file_name: str
    facts: ResumeFacts


class ChatRequest(BaseModel):
    session_id: str
    message: str


class ChatResponse(BaseModel):
    session_id: str
    response: str
    turns: int  # total turns in the session after this exchange
