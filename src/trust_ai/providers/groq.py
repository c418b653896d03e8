"""Groq provider, fast inference via an OpenAI-compatible API."""

from __future__ import annotations

import logging

import openai
from openai import OpenAI

from trust_ai.config import Settings
from trust_ai.providers.base import (
    CompletionError,
    CompletionProvider,
    ProviderConfigError,
)

logger = logging.getLogger(__name__)

GROQ_BASE_URL = "https://api.groq.com/openai/v1"


class GroqProvider(CompletionProvider):
    name = "groq"

    def __init__(self, settings: Settings) -> None:
        super().__init__(settings)
        if not settings.groq_api_key:
            raise ProviderConfigError("GROQ_API_KEY is required for the Groq provider")
        self._client = OpenAI(
            api_key=settings.groq_api_key,
            base_url=GROQ_BASE_URL,
        )
        self._model = settings.groq_model

    def complete(self, prompt: str) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.settings.max_tokens,
                temperature=self.settings.temperature,
            )
        except openai.APIStatusError as exc:
            logger.error("Groq API error %d: %s", exc.status_code, exc.response.text)
            raise CompletionError(
                f"Groq API error: {exc.status_code}",
                status_code=exc.status_code,
                body=exc.response.text,
            ) from exc
        except openai.OpenAIError as exc:
            logger.error("Groq request failed: %s", exc)
            raise CompletionError(f"Groq request failed: {exc}") from exc
        return response.choices[0].message.content or ""
