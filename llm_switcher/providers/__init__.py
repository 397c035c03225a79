"""Chat provider abstraction layer.

Usage:
    from llm_switcher.providers import get_provider, list_providers

    provider = get_provider("gpt-4")
    reply = provider.send_message("Hello")
"""

from llm_switcher.providers.base import LLMProvider, MissingCredentialError, UnknownModelError
from llm_switcher.providers.registry import get_provider, list_providers

__all__ = ["LLMProvider", "MissingCredentialError", "UnknownModelError", "get_provider", "list_providers"]
