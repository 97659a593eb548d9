from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Candidate Screener"
    debug: bool = True

    # CORS
    frontend_url: str = "http://localhost:5173"

    # LLM API Keys (request headers take precedence, these are optional server defaults)
    groq_api_key: Optional[str] = None
    openrouter_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None

    # Optional JSON list of skill terms replacing the built-in vocabulary
    skill_vocabulary_file: Optional[str] = None

    # Uploads
    max_upload_mb: int = 10

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


# ── Model Registry ──────────────────────────────────────────────────────────

MODELS = {
    "groq": {
        "llama-3.3-70b": {
            "name": "LLaMA 3.3 70B",
            "model_id": "groq/llama-3.3-70b-versatile",
        },
    },
    "google": {
        "gemini-2.0-flash": {
            "name": "Gemini 2.0 Flash",
            "model_id": "gemini/gemini-2.0-flash",
        },
    },
    "openrouter": {
        "deepseek-r1-0528": {
            "name": "DeepSeek R1 0528",
            "model_id": "openrouter/deepseek/deepseek-r1-0528:free",
        },
    },
}

DEFAULT_MODEL_KEYS = {
    "groq": "llama-3.3-70b",
    "google": "gemini-2.0-flash",
    "openrouter": "deepseek-r1-0528",
}

# ── Prompt Configuration ────────────────────────────────────────────────────

PROMPT_CONFIG = {
    "resume_extractor": {"temperature": 0.1, "max_tokens": 2000},
}
