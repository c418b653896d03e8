"""Ollama provider for local model inference."""

from __future__ import annotations

import logging

import httpx

from trust_ai.config import Settings
from trust_ai.providers.base import CompletionError, CompletionProvider

logger = logging.getLogger(__name__)


class OllamaProvider(CompletionProvider):
    name = "ollama"

    def __init__(self, settings: Settings) -> None:
        super().__init__(settings)
        self._base_url = settings.ollama_base_url.rstrip("/")
        self._model = settings.ollama_model

    def complete(self, prompt: str) -> str:
        payload: dict = {
            "model": self._model,
            "messages": [{"role": "user", "content": prompt}],
            "stream": False,
            "options": {
                "temperature": self.settings.temperature,
                "num_predict": self.settings.max_tokens,
            },
        }
        try:
            with httpx.Client(timeout=600) as client:
                response = client.post(f"{self._base_url}/api/chat", json=payload)
        except httpx.HTTPError as exc:
            logger.error("Ollama request failed: %s", exc)
            raise CompletionError(f"Ollama request failed: {exc}") from exc

        if not response.is_success:
            logger.error("Ollama error %d: %s", response.status_code, response.text)
            raise CompletionError(
                f"Ollama error: {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )
        return response.json().get("message", {}).get("content", "")
