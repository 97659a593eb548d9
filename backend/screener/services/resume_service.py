"""
Resume Service — from uploaded document to screening session.

Responsibilities:
  • Decode PDF/DOCX/TXT uploads into plain text
  • Run the rule-based fact extractor
  • Optionally merge in an LLM extraction when an API key is available
  • Open a session in the session store
"""

from __future__ import annotations

import logging

from screener.models.chat_models import Session
from screener.models.resume_models import ResumeFacts
from screener.services import session_store
from screener.services.ai_extractor import AIExtractionError, extract_with_llm
from screener.services.document_service import extract_text
from screener.services.fact_extractor import extract, merge_facts
from screener.utils.file_hash import md5_hash, text_hash
from screener.utils.text_cleanup import normalize_text

logger = logging.getLogger(__name__)


# ── Public API ───────────────────────────────────────────────────────────────


async def build_facts(
    text: str,
    *,
    provider: str | None = None,
    model_key: str | None = None,
    api_key: str | None = None,
) -> ResumeFacts:
    """Extract facts from text, merging an LLM extraction when a key is given.

    Raises EmptyDocumentError for blank text. A failing LLM call is logged
    and the rule-based facts are returned unchanged.
    """
    facts = extract(text)

    if not (provider and model_key and api_key):
        return facts

    try:
        ai_facts = await extract_with_llm(
            text=text,
            provider=provider,
            model_key=model_key,
            api_key=api_key,
        )
    except AIExtractionError as e:
        logger.warning(f"LLM extraction unavailable, using rule-based facts only: {e}")
        return facts

    merged = merge_facts(facts, ai_facts)
    logger.info(f"Merged LLM facts: skills {len(facts.skills)} -> {len(merged.skills)}")
    return merged


async def open_session_from_file(
    *,
    file_bytes: bytes,
    file_name: str,
    provider: str | None = None,
    model_key: str | None = None,
    api_key: str | None = None,
) -> Session:
    """Decode an uploaded resume and open a screening session for it."""
    text = extract_text(file_bytes, file_name)
    facts = await build_facts(text, provider=provider, model_key=model_key, api_key=api_key)
    return session_store.create_session(
        facts=facts,
        file_name=file_name,
        file_hash=md5_hash(file_bytes),
    )


async def open_session_from_text(
    *,
    text: str,
    file_name: str,
    provider: str | None = None,
    model_key: str | None = None,
    api_key: str | None = None,
) -> Session:
    """Open a screening session for resume text pasted by the caller."""
    facts = await build_facts(
        normalize_text(text), provider=provider, model_key=model_key, api_key=api_key
    )
    return session_store.create_session(
        facts=facts,
        file_name=file_name,
        file_hash=text_hash(text),
    )
