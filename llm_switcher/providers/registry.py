"""Provider registry — model name to provider lookup.

Usage:
    from llm_switcher.providers import get_provider, list_providers

    provider = get_provider("Claude")
    reply = provider.send_message("Hello")

    for name in list_providers():
        print(name)
"""

from __future__ import annotations

from llm_switcher.providers.anthropic_provider import AnthropicProvider
from llm_switcher.providers.base import LLMProvider, UnknownModelError
from llm_switcher.providers.openai_provider import OpenAIProvider

# ── Static registry ─────────────────────────────────────────────────────

_PROVIDERS: dict[str, type[LLMProvider]] = {
    OpenAIProvider.name: OpenAIProvider,
    AnthropicProvider.name: AnthropicProvider,
}


def get_provider(name: str, *, api_key: str | None = None) -> LLMProvider:
    """Instantiate the provider registered under *name*.

    Args:
        name: ``"gpt-4"`` or ``"claude"``, in any case.
        api_key: Explicit API key.  The environment is read at
            call time otherwise.

    Raises:
        UnknownModelError: *name* is not registered.  The message carries
            *name* exactly as given.
    """
    cls = _PROVIDERS.get(name.strip().lower())
    if cls is None:
        raise UnknownModelError(name, list_providers())
    return cls(api_key=api_key)


def list_providers() -> list[str]:
    """Return sorted list of registered model names."""
    return sorted(_PROVIDERS)
