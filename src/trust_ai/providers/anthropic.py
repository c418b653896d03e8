"""Anthropic Claude provider."""

from __future__ import annotations

import logging

import anthropic

from trust_ai.config import Settings
from trust_ai.providers.base import (
    CompletionError,
    CompletionProvider,
    ProviderConfigError,
)

logger = logging.getLogger(__name__)


class AnthropicProvider(CompletionProvider):
    name = "anthropic"

    def __init__(self, settings: Settings) -> None:
        super().__init__(settings)
        if not settings.anthropic_api_key:
            raise ProviderConfigError(
                "ANTHROPIC_API_KEY is required for the Anthropic provider"
            )
        self._client = anthropic.Anthropic(api_key=settings.anthropic_api_key)

    def complete(self, prompt: str) -> str:
        try:
            response = self._client.messages.create(
                model=self.settings.claude_model,
                max_tokens=self.settings.max_tokens,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.settings.temperature,
            )
        except anthropic.APIStatusError as exc:
            logger.error("Anthropic API error %d: %s", exc.status_code, exc.response.text)
            raise CompletionError(
                f"Anthropic API error: {exc.status_code}",
                status_code=exc.status_code,
                body=exc.response.text,
            ) from exc
        except anthropic.AnthropicError as exc:
            logger.error("Anthropic request failed: %s", exc)
            raise CompletionError(f"Anthropic request failed: {exc}") from exc
        return "".join(
            block.text for block in response.content if block.type == "text"
        )
