"""Anthropic Claude provider.

Uses the Anthropic Python SDK (``anthropic`` package) against the
messages endpoint, ``POST /v1/messages``.  The SDK sends the
``x-api-key`` and ``anthropic-version`` headers.
"""

from __future__ import annotations

import logging
import os
from typing import ClassVar

import anthropic

from llm_switcher.config import get_settings
from llm_switcher.providers.base import LLMProvider

logger = logging.getLogger(__name__)


class AnthropicProvider(LLMProvider):
    """Anthropic Claude — cloud API, messages shape."""

    name: ClassVar[str] = "claude"
    display_name: ClassVar[str] = "Claude 3 (Anthropic)"
    vendor: ClassVar[str] = "Anthropic"

    # ── Subclass hooks ──────────────────────────────────────────────────

    def _resolve_env_key(self) -> str:
        return os.environ.get("ANTHROPIC_API_KEY", get_settings().anthropic_api_key)

    def _model_name(self) -> str:
        return get_settings().anthropic_model

    def _call_model(self, *, key: str, model: str, message: str) -> str:
        settings = get_settings()
        client = anthropic.Anthropic(
            api_key=key,
            base_url=settings.anthropic_base_url,
            max_retries=0,
        )
        response = client.messages.create(
            model=model,
            max_tokens=settings.anthropic_max_tokens,
            messages=[{"role": "user", "content": message}],
        )
        return _first_text(response.content)

    def _log_failure(self, exc: Exception, model: str) -> None:
        _log_anthropic_error(exc, model, self.name)


def _first_text(blocks) -> str:
    """Return the text of the first ``text`` content block."""
    for block in blocks or []:
        if getattr(block, "type", None) == "text":
            return block.text or ""
    return ""


def _log_anthropic_error(exc: Exception, model: str, provider: str) -> None:
    """Log the response body for HTTP errors, the message for transport errors."""
    extra = {"provider": provider, "model": model, "error": type(exc).__name__}
    if isinstance(exc, anthropic.APIStatusError):
        logger.error(
            f"Error in API request: HTTP {exc.status_code} {exc.body!r}",
            extra={**extra, "status_code": exc.status_code},
        )
    elif isinstance(exc, anthropic.APIError):
        logger.error(f"Error in API request: {exc.message}", extra=extra)
    else:
        logger.error(f"An unexpected error occurred: {exc!r}", extra=extra)
