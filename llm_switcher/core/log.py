"""Application-wide logging helpers.

``setup_logging()``  configures a :class:`RotatingFileHandler` on the root
logger.  The console belongs to the chat loop, so diagnostics only go to
the log file.

``safe_print(msg, level)``  emits a log entry at the requested level.

``StructuredFormatter`` outputs JSON log lines for machine-readable logs.

``request_context`` / ``timed`` tag every chat turn with a correlation ID
and measure how long each provider call takes.
"""

from __future__ import annotations

import contextlib
import json
import logging
import time
import uuid
from collections.abc import Generator
from logging.handlers import RotatingFileHandler
from typing import Any

from llm_switcher.config import get_settings

# Correlation ID of the chat turn in flight (the loop is single-threaded)
_request_id: str = ""

_EXTRA_FIELDS = ("duration_ms", "provider", "model", "step", "status_code", "error")


# ── Structured JSON Formatter ───────────────────────────────────────────


class StructuredFormatter(logging.Formatter):
    """Emit each log record as a single JSON line.

    Fields: timestamp, level, logger, message, request_id, and any extras
    passed via the ``extra`` kwarg on the logging call.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if _request_id:
            log_entry["request_id"] = _request_id

        for key in _EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                log_entry[key] = val

        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = str(record.exc_info[1])

        return json.dumps(log_entry, ensure_ascii=False, default=str)


# ── Setup ───────────────────────────────────────────────────────────────


def setup_logging(*, json_format: bool | None = None) -> None:
    """Initialise the root logger with a rotating file handler.

    Args:
        json_format: Use StructuredFormatter (JSON lines) when True, the
                     classic human-readable format when False.  Defaults
                     to the ``log_json`` setting.
    """
    settings = get_settings()
    if json_format is None:
        json_format = settings.log_json

    root = logging.getLogger()
    for h in root.handlers[:]:
        root.removeHandler(h)

    handler = RotatingFileHandler(
        settings.log_file,
        mode="a",
        encoding="utf-8",
        maxBytes=settings.log_max_bytes,
        backupCount=settings.log_backup_count,
    )

    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    root.addHandler(handler)
    root.setLevel(settings.log_level)

    # SDK transports log every request at INFO
    for noisy in ("httpx", "httpcore", "openai", "anthropic"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def safe_print(text: str, level: int = logging.INFO) -> None:
    """Emit *text* through the logging system."""
    try:
        logging.log(level, text)
    except Exception:
        pass


# ── Observability helpers ───────────────────────────────────────────────


def set_request_id(rid: str | None = None) -> str:
    """Set a correlation ID for the current chat turn.  Returns the ID."""
    global _request_id
    _request_id = rid or uuid.uuid4().hex[:12]
    return _request_id


def get_request_id() -> str:
    """Return the current correlation ID (empty if unset)."""
    return _request_id


def clear_request_id() -> None:
    global _request_id
    _request_id = ""


@contextlib.contextmanager
def request_context(rid: str | None = None) -> Generator[str, None, None]:
    """Context manager that sets and clears a request correlation ID.

    Usage::

        with request_context() as rid:
            safe_print(f"Processing turn {rid}")
            # all log lines within will include request_id
    """
    token = set_request_id(rid)
    try:
        yield token
    finally:
        clear_request_id()


@contextlib.contextmanager
def timed(operation: str, **extra: Any) -> Generator[None, None, None]:
    """Context manager that logs the duration of an operation.

    Usage::

        with timed("send_message", provider="claude"):
            reply = provider.send_message(text)

    Emits an INFO log with ``duration_ms`` at the end, or an ERROR log if
    the block raised.  The exception is never swallowed.
    """
    logger = logging.getLogger("llm_switcher.timing")
    start = time.perf_counter()
    logger.info(f"[START] {operation}", extra={"step": operation, **extra})
    try:
        yield
    except Exception:
        elapsed = (time.perf_counter() - start) * 1000
        logger.error(
            f"[FAILED] {operation} after {elapsed:.0f}ms",
            extra={"duration_ms": round(elapsed), "step": operation, **extra},
        )
        raise
    else:
        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            f"[DONE] {operation} in {elapsed:.0f}ms",
            extra={"duration_ms": round(elapsed), "step": operation, **extra},
        )
