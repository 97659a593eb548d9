"""
Request-scoped helpers — extract LLM settings from headers for optional AI extraction.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Header

from screener.config import DEFAULT_MODEL_KEYS, settings


class LLMChoice:
    """Provider, model and key for one request. ``api_key`` None disables AI extraction."""

    def __init__(
        self,
        provider: str | None = None,
        model_key: str | None = None,
        api_key: str | None = None,
    ):
        self.provider = provider
        self.model_key = model_key
        self.api_key = api_key

    @property
    def enabled(self) -> bool:
        return bool(self.provider and self.model_key and self.api_key)


_SERVER_KEYS = {
    "groq": lambda: settings.groq_api_key,
    "google": lambda: settings.gemini_api_key,
    "openrouter": lambda: settings.openrouter_api_key,
}


async def get_llm_choice(
    provider: Optional[str] = Header(None, alias="X-LLM-Provider"),
    model_key: Optional[str] = Header(None, alias="X-LLM-Model"),
    x_groq_key: Optional[str] = Header(None, alias="X-Groq-Key"),
    x_google_key: Optional[str] = Header(None, alias="X-Google-Key"),
    x_openrouter_key: Optional[str] = Header(None, alias="X-OpenRouter-Key"),
) -> LLMChoice:
    """FastAPI dependency: which LLM (if any) should assist extraction."""
    if not provider:
        return LLMChoice()

    header_keys = {
        "groq": x_groq_key,
        "google": x_google_key,
        "openrouter": x_openrouter_key,
    }
    server_key = _SERVER_KEYS.get(provider, lambda: None)()
    return LLMChoice(
        provider=provider,
        model_key=model_key or DEFAULT_MODEL_KEYS.get(provider),
        api_key=header_keys.get(provider) or server_key,
    )
