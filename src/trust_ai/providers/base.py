"""Abstract base class for all completion providers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from trust_ai.config import Settings
from trust_ai.models import AnalysisResult
from trust_ai.parsing import parse_analysis

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 200


class CompletionError(Exception):
    """Raised when the completion endpoint call fails."""

    def __init__(
        self, message: str, status_code: int | None = None, body: str = ""
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ProviderConfigError(ValueError):
    """Raised when a provider lacks a usable credential."""


class CompletionProvider(ABC):
    """Contract for chat-completion backends."""

    name: str

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @abstractmethod
    def complete(self, prompt: str) -> str:
        """
        Send the prompt as a single user message and return the reply text.

        Raises:
            CompletionError: on any transport or non-success API response.
        """
        ...

    def analyze(self, prompt: str) -> AnalysisResult:
        """Complete the prompt and parse the verdict out of the reply."""
        raw = self.complete(prompt)
        logger.info("%s response preview: %s...", self.name, raw[:PREVIEW_CHARS])
        return parse_analysis(raw)
