"""Centralised application configuration using pydantic-settings.

All environment variables, defaults, and validation live here.
Usage:
    from llm_switcher.config import get_settings
    print(get_settings().openai_model)
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Single source of truth for every tuneable parameter."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # silently ignore unknown env vars
        case_sensitive=False,
    )

    # ── OpenAI ──────────────────────────────────────────────────────────
    openai_api_key: str = Field(default="", description="OpenAI API key")
    openai_model: str = Field(default="gpt-4")
    openai_base_url: str = Field(default="https://api.openai.com/v1")

    # ── Anthropic Claude ────────────────────────────────────────────────
    anthropic_api_key: str = Field(default="", description="Anthropic API key")
    anthropic_model: str = Field(default="claude-3-sonnet-20240229")
    anthropic_max_tokens: int = Field(default=1024, ge=1)
    anthropic_base_url: str = Field(default="https://api.anthropic.com")

    # ── Chat loop ───────────────────────────────────────────────────────
    exit_sentinel: str = Field(default="exit", description="Input that ends the chat loop")
    echo_input: bool = Field(default=True, description="Echo each input line before sending it")

    # ── Logging ─────────────────────────────────────────────────────────
    log_file: str = Field(default="llm_switcher.log")
    log_max_bytes: int = Field(default=5 * 1024 * 1024)  # 5 MB
    log_backup_count: int = Field(default=3)
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True)

    # ── Validators ──────────────────────────────────────────────────────
    @field_validator("openai_base_url", "anthropic_base_url")
    @classmethod
    def _validate_base_url(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base url must start with http(s)://, got '{v}'")
        return v

    @field_validator("exit_sentinel")
    @classmethod
    def _validate_sentinel(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("exit_sentinel must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return v


@lru_cache(maxsize=1)
def get_settings() -> AppConfig:
    """Return the cached singleton settings instance."""
    return AppConfig()
