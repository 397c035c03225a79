"""OpenAI provider (GPT-4 over the chat-completions API)."""

from __future__ import annotations

import logging
import os
from typing import ClassVar

import openai
from openai import OpenAI as OpenAIClient

from llm_switcher.config import get_settings
from llm_switcher.providers.base import LLMProvider

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """OpenAI (cloud): ``POST /v1/chat/completions`` with a bearer token."""

    name: ClassVar[str] = "gpt-4"
    display_name: ClassVar[str] = "OpenAI GPT-4.0"
    vendor: ClassVar[str] = "OpenAI"

    # ── Subclass hooks ──────────────────────────────────────────────────

    def _resolve_env_key(self) -> str:
        return os.environ.get("OPENAI_API_KEY", get_settings().openai_api_key)

    def _model_name(self) -> str:
        return get_settings().openai_model

    def _call_model(self, *, key: str, model: str, message: str) -> str:
        client = OpenAIClient(
            api_key=key,
            base_url=get_settings().openai_base_url,
            max_retries=0,
        )
        return self._chat_completion(client, model, message)

    def _log_failure(self, exc: Exception, model: str) -> None:
        _log_openai_error(exc, model, self.name)

    # ── Chat-completions helper ─────────────────────────────────────────

    @staticmethod
    def _chat_completion(client, model: str, message: str) -> str:
        resp = client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": message}],
        )
        if not resp.choices:
            return ""
        return resp.choices[0].message.content or ""


def _log_openai_error(exc: Exception, model: str, provider: str) -> None:
    """Log what is known about a failed chat-completions request."""
    extra = {"provider": provider, "model": model, "error": type(exc).__name__}
    if isinstance(exc, openai.APIStatusError):
        logger.error(
            f"Error in API request: HTTP {exc.status_code} {exc.body!r}",
            extra={**extra, "status_code": exc.status_code},
        )
    elif isinstance(exc, openai.APIError):
        logger.error(f"Error in API request: {exc.message}", extra=extra)
    else:
        logger.error(f"An unexpected error occurred: {exc!r}", extra=extra)
