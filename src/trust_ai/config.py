"""Centralized configuration loaded from .env."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

# Only this much of a credential is ever shown in diagnostics.
KEY_PREFIX_CHARS = 15


def _load_env(env_file: str | Path | None = None) -> None:
    """Load credentials from an explicit file, else ./.env, else a parent .env."""
    if env_file is not None:
        path = Path(env_file)
        if not path.is_file():
            raise FileNotFoundError(f"Env file not found: {path}")
        load_dotenv(dotenv_path=path)
        return
    env_path = Path.cwd() / ".env"
    load_dotenv(dotenv_path=env_path if env_path.exists() else None)


@dataclass(frozen=True)
class Settings:
    # AI provider keys
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"
    anthropic_api_key: str = ""
    claude_model: str = "claude-haiku-4-5-20251001"

    # Ollama config
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "phi4-mini"

    # Groq config (OpenAI-compatible)
    groq_api_key: str = ""
    groq_model: str = "llama-3.1-8b-instant"

    # Gemini config
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"

    # Completion request
    default_provider: str = "openai"
    max_tokens: int = 2000
    temperature: float = 0.3

    # Page fetch / extraction
    fetch_timeout: float = 5.0  # httpx's own default
    user_agent: str = DEFAULT_USER_AGENT
    max_reviews: int = 20

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> Settings:
        _load_env(env_file)
        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o"),
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY", ""),
            claude_model=os.getenv("CLAUDE_MODEL", "claude-haiku-4-5-20251001"),
            ollama_base_url=os.getenv("OLLAMA_BASE_URL", "http://localhost:11434"),
            ollama_model=os.getenv("OLLAMA_MODEL", "phi4-mini"),
            groq_api_key=os.getenv("GROQ_API_KEY", ""),
            groq_model=os.getenv("GROQ_MODEL", "llama-3.1-8b-instant"),
            gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
            gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
            default_provider=os.getenv("DEFAULT_PROVIDER", "openai"),
            max_tokens=int(os.getenv("MAX_TOKENS", "2000")),
            temperature=float(os.getenv("TEMPERATURE", "0.3")),
            fetch_timeout=float(os.getenv("FETCH_TIMEOUT", "5.0")),
            max_reviews=int(os.getenv("MAX_REVIEWS", "20")),
        )


def describe_credentials(settings: Settings) -> dict:
    """
    Summarize the OpenAI credential without exposing it.

    Only the presence, length and a short prefix of the key are reported,
    plus the *names* of API-related environment variables.
    """
    key = settings.openai_api_key
    return {
        "hasKey": bool(key),
        "keyLength": len(key),
        "keyPrefix": key[:KEY_PREFIX_CHARS] if key else "none",
        "allEnvKeys": sorted(
            name for name in os.environ if "OPENAI" in name or "API" in name
        ),
    }
