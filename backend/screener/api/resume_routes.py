from fastapi import APIRouter, HTTPException, UploadFile, File, Depends
import logging

from screener.config import settings
from screener.models.chat_models import Session, SessionCreated
from screener.models.resume_models import ResumeTextRequest
from screener.services import session_store
from screener.services.document_service import SUPPORTED_EXTENSIONS, file_extension
from screener.services.resume_service import open_session_from_file, open_session_from_text
from screener.utils.dependencies import LLMChoice, get_llm_choice

logger = logging.getLogger(__name__)

router = APIRouter()


def _created(session: Session) -> SessionCreated:
    return SessionCreated(
        session_id=session.id,
        file_name=session.file_name,
        facts=session.facts,
    )


@router.post("/upload", response_model=SessionCreated)
async def upload_resume(
    file: UploadFile = File(...),
    llm: LLMChoice = Depends(get_llm_choice),
):
    """Upload a resume file (PDF/DOCX/TXT), extract facts and open a session."""
    if not file.filename:
        raise HTTPException(status_code=400, detail="No file provided")

    ext = file_extension(file.filename)
    if ext not in SUPPORTED_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type: .{ext}. Please upload PDF, DOCX or TXT.",
        )

    file_bytes = await file.read()
    if len(file_bytes) > settings.max_upload_mb * 1024 * 1024:
        raise HTTPException(
            status_code=400,
            detail=f"File too large (max {settings.max_upload_mb} MB)",
        )

    logger.info(f"Processing upload: {file.filename} (llm={'on' if llm.enabled else 'off'})")

    try:
        session = await open_session_from_file(
            file_bytes=file_bytes,
            file_name=file.filename,
            provider=llm.provider,
            model_key=llm.model_key,
            api_key=llm.api_key,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Could not read this file: {e}")
    except Exception as e:
        logger.error(f"Resume parsing failed for {file.filename}: {e}")
        raise HTTPException(status_code=500, detail=f"Resume parsing failed: {e}")

    return _created(session)


@router.post("/text", response_model=SessionCreated)
async def submit_resume_text(
    req: ResumeTextRequest,
    llm: LLMChoice = Depends(get_llm_choice),
):
    """Open a session from resume text that has already been decoded."""
    try:
        session = await open_session_from_text(
            text=req.text,
            file_name=req.file_name,
            provider=llm.provider,
            model_key=llm.model_key,
            api_key=llm.api_key,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Could not read this resume: {e}")

    return _created(session)


@router.get("/sessions", response_model=list[Session])
async def list_sessions():
    """List all screening sessions held in memory."""
    return session_store.list_sessions()


@router.delete("/sessions")
async def clear_sessions():
    """Clear all sessions."""
    count = session_store.clear_sessions()
    return {"cleared": count}
