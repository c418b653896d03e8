"""OpenAI provider using GPT-4o."""

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

OPENAI_KEY_PREFIX = "sk-"


class OpenAIProvider(CompletionProvider):
    name = "openai"

    def __init__(self, settings: Settings) -> None:
        super().__init__(settings)
        if not settings.openai_api_key.startswith(OPENAI_KEY_PREFIX):
            raise ProviderConfigError(
                "OPENAI_API_KEY is required for the OpenAI provider "
                f"and must start with '{OPENAI_KEY_PREFIX}'"
            )
        self._client = OpenAI(api_key=settings.openai_api_key)

    def complete(self, prompt: str) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self.settings.openai_model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.settings.max_tokens,
                temperature=self.settings.temperature,
            )
        except openai.APIStatusError as exc:
            logger.error("OpenAI API error %d: %s", exc.status_code, exc.response.text)
            raise CompletionError(
                f"OpenAI API error: {exc.status_code}",
                status_code=exc.status_code,
                body=exc.response.text,
            ) from exc
        except openai.OpenAIError as exc:
            logger.error("OpenAI request failed: %s", exc)
            raise CompletionError(f"OpenAI request failed: {exc}") from exc
        return response.choices[0].message.content or ""
