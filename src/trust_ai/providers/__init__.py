"""Completion backends by name, imported only when selected."""

from __future__ import annotations

import importlib

from trust_ai.config import Settings
from trust_ai.providers.base import CompletionProvider

# name -> (module, class); SDKs for unused backends never get imported.
_BACKENDS: dict[str, tuple[str, str]] = {
    "openai": ("trust_ai.providers.openai", "OpenAIProvider"),
    "anthropic": ("trust_ai.providers.anthropic", "AnthropicProvider"),
    "ollama": ("trust_ai.providers.ollama", "OllamaProvider"),
    "groq": ("trust_ai.providers.groq", "GroqProvider"),
    "gemini": ("trust_ai.providers.gemini", "GeminiProvider"),
}


def get_provider(name: str, settings: Settings) -> CompletionProvider:
    """
    Build the completion backend that will score the reviews.

    Raises:
        ValueError: if no backend is registered under ``name``.
        ProviderConfigError: if the backend has no usable credential.
    """
    try:
        module_path, class_name = _BACKENDS[name]
    except KeyError:
        raise ValueError(
            f"No completion backend named '{name}' for review scoring; "
            f"choose one of: {', '.join(list_providers())}"
        ) from None

    provider_class = getattr(importlib.import_module(module_path), class_name)
    return provider_class(settings)


def list_providers() -> list[str]:
    return sorted(_BACKENDS)
