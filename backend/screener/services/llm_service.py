"""
LLM Service — unified interface to all providers via LiteLLM.

Responsibilities:
  • Accept an API key + model identifier per-request
  • Route to the correct provider (Groq, Google, OpenRouter) via LiteLLM
  • Provide a structured completion helper (JSON mode)
"""

from __future__ import annotations

import json
import logging
from typing import Any

import litellm
from litellm import acompletion

from screener.config import MODELS, PROMPT_CONFIG

logger = logging.getLogger(__name__)

# Silence verbose LiteLLM logs
litellm.suppress_debug_info = True


def _resolve_model_id(provider: str, model_key: str) -> str:
    """Look up the LiteLLM model_id from our registry."""
    provider_models = MODELS.get(provider)
    if not provider_models:
        raise ValueError(f"Unknown provider: {provider}")
    model_entry = provider_models.get(model_key)
    if not model_entry:
        raise ValueError(f"Unknown model: {model_key} for provider {provider}")
    return model_entry["model_id"]


# ── Core Completion ──────────────────────────────────────────────────────────


async def complete(
    *,
    provider: str,
    model_key: str,
    api_key: str,
    messages: list[dict[str, str]],
    prompt_name: str | None = None,
    json_mode: bool = False,
) -> str:
    """
    Send a chat completion request via LiteLLM.

    Args:
        provider:    "groq" | "google" | "openrouter"
        model_key:   Key from MODELS registry (e.g. "llama-3.3-70b")
        api_key:     API key for the provider
        messages:    OpenAI-format message list
        prompt_name: Optional key into PROMPT_CONFIG for temperature/tokens
        json_mode:   If True, request JSON output

    Returns:
        The assistant's response text.
    """
    model_id = _resolve_model_id(provider, model_key)

    config = PROMPT_CONFIG.get(prompt_name, {}) if prompt_name else {}
    kwargs: dict[str, Any] = {
        "model": model_id,
        "messages": messages,
        "temperature": config.get("temperature", 0.3),
        "max_tokens": config.get("max_tokens", 1500),
        "api_key": api_key,
    }
    if json_mode:
        kwargs["response_format"] = {"type": "json_object"}

    logger.info(f"LLM call: provider={provider} model={model_id}")

    try:
        response = await acompletion(**kwargs)
    except Exception as e:
        logger.error(f"LLM error ({provider}/{model_key}): {e}")
        raise

    content = response.choices[0].message.content or ""
    logger.info(f"LLM response: {len(content)} chars, usage={getattr(response, 'usage', None)}")
    return content


async def complete_json(
    *,
    provider: str,
    model_key: str,
    api_key: str,
    messages: list[dict[str, str]],
    prompt_name: str | None = None,
) -> dict | list:
    """
    Same as complete() but parses the response as JSON.
    Falls back to extracting JSON from markdown code blocks if needed.
    """
    raw = await complete(
        provider=provider,
        model_key=model_key,
        api_key=api_key,
        messages=messages,
        prompt_name=prompt_name,
        json_mode=True,
    )
    return parse_json_reply(raw)


def parse_json_reply(raw: str) -> dict | list:
    """Parse a model reply as JSON, tolerating ``` fences around it."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        pass

    for fence in ("```json", "```"):
        if fence in raw:
            start = raw.index(fence) + len(fence)
            end = raw.find("```", start)
            if end != -1:
                return json.loads(raw[start:end].strip())

    raise ValueError(f"Could not parse LLM response as JSON: {raw[:200]}...")
