"""Tests for llm_switcher.config — Pydantic-based configuration."""

from __future__ import annotations

import pytest

from llm_switcher.config import AppConfig, get_settings


class TestAppConfig:
    """Validate AppConfig defaults and validators."""

    def test_defaults(self):
        cfg = get_settings()
        assert cfg.openai_model == "gpt-4"
        assert cfg.anthropic_model == "claude-3-sonnet-20240229"
        assert cfg.anthropic_max_tokens == 1024
        assert cfg.exit_sentinel == "exit"
        assert cfg.echo_input is True
        assert cfg.log_level == "INFO"

    def test_default_base_urls(self):
        cfg = get_settings()
        assert cfg.openai_base_url == "https://api.openai.com/v1"
        assert cfg.anthropic_base_url == "https://api.anthropic.com"

    def test_api_keys_empty_in_isolated_env(self):
        cfg = get_settings()
        assert cfg.openai_api_key == ""
        assert cfg.anthropic_api_key == ""

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_MAX_TOKENS", "256")
        monkeypatch.setenv("ECHO_INPUT", "false")
        get_settings.cache_clear()
        cfg = get_settings()
        assert cfg.anthropic_max_tokens == 256
        assert cfg.echo_input is False

    def test_dotenv_file_is_read(self, tmp_path, monkeypatch):
        monkeypatch.delenv("ANTHROPIC_API_KEY")
        (tmp_path / ".env").write_text("ANTHROPIC_API_KEY=sk-ant-from-file\n", encoding="utf-8")
        get_settings.cache_clear()
        assert get_settings().anthropic_api_key == "sk-ant-from-file"

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()

    def test_base_url_rejects_invalid(self):
        with pytest.raises(Exception):
            AppConfig(openai_base_url="api.openai.com")

    def test_base_url_trailing_slash_stripped(self):
        cfg = AppConfig(anthropic_base_url="https://proxy.local/anthropic/")
        assert cfg.anthropic_base_url == "https://proxy.local/anthropic"

    def test_sentinel_normalised(self):
        cfg = AppConfig(exit_sentinel="  QUIT ")
        assert cfg.exit_sentinel == "quit"

    def test_sentinel_rejects_blank(self):
        with pytest.raises(Exception):
            AppConfig(exit_sentinel="   ")

    def test_log_level_normalised(self):
        assert AppConfig(log_level="debug").log_level == "DEBUG"

    def test_log_level_rejects_unknown(self):
        with pytest.raises(Exception):
            AppConfig(log_level="chatty")

    def test_max_tokens_bounds(self):
        with pytest.raises(Exception):
            AppConfig(anthropic_max_tokens=0)
