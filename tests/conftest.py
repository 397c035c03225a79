"""Shared fixtures for llm_switcher tests."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Ensure project root is on path
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

# ── Environment isolation ───────────────────────────────────────────────
# Prevent tests from touching real API keys / services


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Isolate every test from real env vars, .env files and the log file."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENAI_API_KEY", "")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "")
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "test.log"))
    for var in ("EXIT_SENTINEL", "ECHO_INPUT", "OPENAI_MODEL", "ANTHROPIC_MODEL", "LOG_LEVEL", "LOG_JSON",
                "OPENAI_BASE_URL", "ANTHROPIC_BASE_URL"):
        monkeypatch.delenv(var, raising=False)

    # Clear the cached settings singleton so each test picks up monkeypatched env
    from llm_switcher.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after ``setup_logging`` ran."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)


# ── Reusable fixtures ──────────────────────────────────────────────────


@pytest.fixture
def scripted_input():
    """Factory returning a ``read_line`` stand-in that replays *lines* then hits EOF."""

    def _factory(*lines: str):
        remaining = list(lines)
        prompts: list[str] = []

        def read_line(prompt: str) -> str:
            prompts.append(prompt)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        read_line.prompts = prompts  # type: ignore[attr-defined]
        return read_line

    return _factory
