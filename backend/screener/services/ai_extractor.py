"""
AI Extractor — LLM-assisted resume facts, merged later with the rule-based ones.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from screener.models.resume_models import ResumeFacts
from screener.prompts.resume_extractor import SYSTEM_PROMPT, USER_PROMPT_TEMPLATE
from screener.services.llm_service import complete_json

logger = logging.getLogger(__name__)


class AIExtractionError(RuntimeError):
    """The LLM provider failed or returned something we cannot use."""


async def extract_with_llm(
    *,
    text: str,
    provider: str,
    model_key: str,
    api_key: str,
) -> ResumeFacts:
    """Ask the configured LLM for ResumeFacts-shaped output."""
    messages = [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": USER_PROMPT_TEMPLATE.format(resume_text=text)},
    ]

    logger.info(f"LLM extraction ({len(text)} chars) with {provider}/{model_key}")

    try:
        data = await complete_json(
            provider=provider,
            model_key=model_key,
            api_key=api_key,
            messages=messages,
            prompt_name="resume_extractor",
        )
    except Exception as e:
        raise AIExtractionError(f"LLM extraction failed: {e}") from e

    return build_ai_facts(data, source_text=text)


def build_ai_facts(data: dict | list, source_text: str = "") -> ResumeFacts:
    """Build ResumeFacts from LLM JSON output, with safe defaults."""
    if isinstance(data, list):
        data = data[0] if data else {}
    if not isinstance(data, dict):
        raise AIExtractionError(f"Expected a JSON object, got {type(data).__name__}")

    name = data.get("name")
    return ResumeFacts(
        candidate_name=name.strip() if isinstance(name, str) else "",
        skills=_ensure_str_list(data.get("skills")),
        experience_entries=_ensure_str_list(data.get("experience")),
        education_entries=_ensure_str_list(data.get("education")),
        source_text=source_text,
    )


def _ensure_str_list(val: Any) -> tuple[str, ...]:
    """Coerce a JSON value into a tuple of non-empty strings.

    Objects (e.g. {"title": ..., "company": ...}) are flattened by joining
    their values, since the models do not always follow the flat schema.
    """
    if isinstance(val, str):
        val = [val]
    if not isinstance(val, list):
        return ()

    out: list[str] = []
    for item in val:
        if isinstance(item, dict):
            item = ", ".join(str(v) for v in item.values() if v)
        elif not isinstance(item, str):
            item = json.dumps(item) if isinstance(item, list) else str(item)
        item = item.strip()
        if item:
            out.append(item)
    return tuple(out)
