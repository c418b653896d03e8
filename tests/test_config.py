"""Tests for trust_ai.config module."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from trust_ai.config import DEFAULT_USER_AGENT, Settings, describe_credentials


class TestSettings:
    def test_default_values(self):
        s = Settings()
        assert s.openai_api_key == ""
        assert s.openai_model == "gpt-4o"
        assert s.anthropic_api_key == ""
        assert s.claude_model == "claude-haiku-4-5-20251001"
        assert s.ollama_base_url == "http://localhost:11434"
        assert s.ollama_model == "phi4-mini"
        assert s.groq_model == "llama-3.1-8b-instant"
        assert s.gemini_model == "gemini-2.5-flash"
        assert s.default_provider == "openai"
        assert s.max_tokens == 2000
        assert s.temperature == 0.3
        assert s.max_reviews == 20
        assert s.fetch_timeout == 5.0
        assert s.user_agent == DEFAULT_USER_AGENT

    def test_user_agent_looks_like_a_browser(self):
        assert DEFAULT_USER_AGENT.startswith("Mozilla/5.0")
        assert "Chrome" in DEFAULT_USER_AGENT

    def test_frozen_dataclass(self):
        s = Settings()
        with pytest.raises(AttributeError):
            s.openai_api_key = "new-key"  # type: ignore[misc]

    def test_from_env_reads_env_vars(self):
        env = {
            "OPENAI_API_KEY": "sk-my-openai-key",
            "OPENAI_MODEL": "gpt-4o-mini",
            "ANTHROPIC_API_KEY": "my-anthropic-key",
            "CLAUDE_MODEL": "claude-sonnet-4-20250514",
            "OLLAMA_BASE_URL": "http://myhost:11434",
            "OLLAMA_MODEL": "llama3",
            "GROQ_API_KEY": "my-groq-key",
            "GROQ_MODEL": "mixtral",
            "GEMINI_API_KEY": "my-gemini-key",
            "GEMINI_MODEL": "gemini-pro",
            "DEFAULT_PROVIDER": "anthropic",
            "MAX_TOKENS": "1500",
            "TEMPERATURE": "0.1",
            "FETCH_TIMEOUT": "12.5",
            "MAX_REVIEWS": "10",
        }
        with patch.dict("os.environ", env, clear=False), \
             patch("trust_ai.config.load_dotenv"):
            s = Settings.from_env()
            assert s.openai_api_key == "sk-my-openai-key"
            assert s.openai_model == "gpt-4o-mini"
            assert s.anthropic_api_key == "my-anthropic-key"
            assert s.claude_model == "claude-sonnet-4-20250514"
            assert s.ollama_base_url == "http://myhost:11434"
            assert s.ollama_model == "llama3"
            assert s.groq_api_key == "my-groq-key"
            assert s.groq_model == "mixtral"
            assert s.gemini_api_key == "my-gemini-key"
            assert s.gemini_model == "gemini-pro"
            assert s.default_provider == "anthropic"
            assert s.max_tokens == 1500
            assert s.temperature == 0.1
            assert s.fetch_timeout == 12.5
            assert s.max_reviews == 10

    def test_from_env_without_keys_does_not_raise(self):
        with patch.dict("os.environ", {}, clear=True), \
             patch("trust_ai.config.load_dotenv"):
            s = Settings.from_env()
        assert s.openai_api_key == ""
        assert s.default_provider == "openai"

    def test_from_env_explicit_file(self, tmp_path):
        env_file = tmp_path / "review.env"
        env_file.write_text("OPENAI_API_KEY=sk-from-file\nMAX_REVIEWS=5\n", encoding="utf-8")
        with patch.dict("os.environ", {}, clear=True):
            s = Settings.from_env(env_file)
        assert s.openai_api_key == "sk-from-file"
        assert s.max_reviews == 5

    def test_from_env_missing_explicit_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Env file not found"):
            Settings.from_env(tmp_path / "absent.env")


class TestDescribeCredentials:
    def test_reports_prefix_and_length_only(self):
        key = "sk-proj-abcdefghijklmnopqrstuvwxyz"
        s = Settings(openai_api_key=key)
        with patch.dict("os.environ", {"OPENAI_API_KEY": key}, clear=True):
            info = describe_credentials(s)
        assert info["hasKey"] is True
        assert info["keyLength"] == len(key)
        assert info["keyPrefix"] == key[:15]
        assert key not in info.values()
        assert info["allEnvKeys"] == ["OPENAI_API_KEY"]

    def test_missing_key(self):
        with patch.dict("os.environ", {}, clear=True):
            info = describe_credentials(Settings())
        assert info["hasKey"] is False
        assert info["keyLength"] == 0
        assert info["keyPrefix"] == "none"

    def test_env_key_names_filtered(self):
        env = {"GROQ_API_KEY": "x", "HOME": "/root", "OPENAI_MODEL": "gpt-4o"}
        with patch.dict("os.environ", env, clear=True):
            info = describe_credentials(Settings())
        assert info["allEnvKeys"] == ["GROQ_API_KEY", "OPENAI_MODEL"]
