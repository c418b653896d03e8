"""Google Gemini provider."""

from __future__ import annotations

import logging

import httpx
from google import genai
from google.genai import errors, types

from trust_ai.config import Settings
from trust_ai.providers.base import (
    CompletionError,
    CompletionProvider,
    ProviderConfigError,
)

logger = logging.getLogger(__name__)


class GeminiProvider(CompletionProvider):
    name = "gemini"

    def __init__(self, settings: Settings) -> None:
        super().__init__(settings)
        if not settings.gemini_api_key:
            raise ProviderConfigError("GEMINI_API_KEY is required for the Gemini provider")
        self._client = genai.Client(api_key=settings.gemini_api_key)
        self._model = settings.gemini_model

    def complete(self, prompt: str) -> str:
        config = types.GenerateContentConfig(
            temperature=self.settings.temperature,
            max_output_tokens=self.settings.max_tokens,
        )
        try:
            response = self._client.models.generate_content(
                model=self._model,
                config=config,
                contents=prompt,
            )
        except errors.APIError as exc:
            logger.error("Gemini API error %s: %s", exc.code, exc.message)
            raise CompletionError(
                f"Gemini API error: {exc.code}",
                status_code=exc.code,
                body=exc.message or "",
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("Gemini request failed: %s", exc)
            raise CompletionError(f"Gemini request failed: {exc}") from exc
        return response.text or ""
