from fastapi import APIRouter, HTTPException
import logging

from screener.models.chat_models import ChatRequest, ChatResponse, Session
from screener.services import session_store
from screener.services.chat_service import respond

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_or_404(session_id: str) -> Session:
    session = session_store.get_session(session_id)
    if not session:
        logger.info(f"Session not found: {session_id}")
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")
    return session


@router.post("/chat", response_model=ChatResponse)
async def chat(req: ChatRequest):
    """Send a candidate message and get the next screening question."""
    if not req.message.strip():
        raise HTTPException(status_code=400, detail="Message cannot be empty")

    session = _get_or_404(req.session_id)

    # No await between reading the history and appending to it
    reply = respond(session, req.message)
    return ChatResponse(session_id=session.id, response=reply, turns=len(session.turns))


@router.get("/sessions/{session_id}", response_model=Session)
async def get_session(session_id: str):
    """Get a session with its facts and full conversation."""
    return _get_or_404(session_id)
