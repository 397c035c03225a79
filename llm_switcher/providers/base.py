"""Abstract base class for both chat providers.

Every provider implements :meth:`_call_model` and :meth:`_resolve_env_key`.
The shared :meth:`send_message` resolves the credential first, so a
missing key fails before any client is built, then logs and re-raises
whatever the vendor SDK throws.  There is no retry loop: one message,
one request.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from llm_switcher.core.log import safe_print, timed


class LLMProvider(ABC):
    """Strategy interface: accepts text, returns text."""

    # Subclasses must set these
    name: ClassVar[str] = "base"
    display_name: ClassVar[str] = "Base"
    vendor: ClassVar[str] = "base"

    def __init__(self, api_key: str | None = None):
        self.api_key = api_key

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    # ── Public API ──────────────────────────────────────────────────────

    def send_message(self, message: str) -> str:
        """Send *message* as a single user turn and return the reply text.

        Raises:
            MissingCredentialError: no API key is configured.  Raised before
                any network call is attempted.
            Exception: whatever the vendor SDK raised, after it was logged.
        """
        key = self.api_key or self._resolve_env_key()
        if not key or not key.strip():
            raise MissingCredentialError(f"{self.vendor} API key not found.")

        model = self._model_name()
        safe_print(f"[{self.name}] Sending {len(message)} chars to {model}", logging.DEBUG)
        with timed("send_message", provider=self.name, model=model):
            try:
                return self._call_model(key=key.strip(), model=model, message=message)
            except Exception as exc:
                self._log_failure(exc, model)
                raise

    # ── Subclass contract ───────────────────────────────────────────────

    @abstractmethod
    def _call_model(self, *, key: str, model: str, message: str) -> str:
        """Issue one request and return the extracted reply text."""

    @abstractmethod
    def _resolve_env_key(self) -> str:
        """Return the API key from the environment (empty if unset)."""

    @abstractmethod
    def _model_name(self) -> str:
        """Return the vendor model id this provider sends requests to."""

    def _log_failure(self, exc: Exception, model: str) -> None:
        """Record diagnostic detail about a failed call.  Override to add SDK specifics."""
        logging.getLogger(__name__).error(
            f"[{self.name}] An unexpected error occurred: {exc!r}",
            extra={"provider": self.name, "model": model, "error": type(exc).__name__},
        )


# ── Error hierarchy ─────────────────────────────────────────────────────


class LLMSwitcherError(ValueError):
    """Base class for errors raised by this package."""


class MissingCredentialError(LLMSwitcherError):
    """The provider's API key is absent from the environment."""


class UnknownModelError(LLMSwitcherError):
    """No provider is registered under the requested model name."""

    def __init__(self, model: str, available: list[str] | None = None):
        self.model = model
        self.available = available or []
        super().__init__(f"Unknown model: {model}")
