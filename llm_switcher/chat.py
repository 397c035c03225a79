"""Interactive read → send → print loop.

The loop has two states: it keeps READING lines until the exit sentinel,
end of input, or Ctrl-C moves it to DONE.  Provider errors are printed and
the loop carries on; exactly one request is outstanding at a time.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

from llm_switcher.config import get_settings
from llm_switcher.core.log import request_context, safe_print
from llm_switcher.providers.base import LLMProvider

PROMPT = "You: "


def _print_error(text: str) -> None:
    print(text, file=sys.stderr)


class ChatLoop:
    """Drive one provider from a line-oriented console.

    ``read_line`` / ``write`` / ``write_error`` default to :func:`input` and
    :func:`print` (stderr for errors) and can be swapped out in tests.
    """

    def __init__(
        self,
        provider: LLMProvider,
        *,
        read_line: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
        write_error: Callable[[str], None] | None = None,
        exit_sentinel: str | None = None,
        echo_input: bool | None = None,
    ):
        settings = get_settings()
        self.provider = provider
        self.read_line = read_line or input
        self.write = write or print
        self.write_error = write_error or _print_error
        sentinel = settings.exit_sentinel if exit_sentinel is None else exit_sentinel
        self.exit_sentinel = sentinel.strip().lower()
        if not self.exit_sentinel:
            raise ValueError("exit_sentinel must not be empty")
        self.echo_input = settings.echo_input if echo_input is None else echo_input
        self.turns = 0

    def is_exit(self, line: str) -> bool:
        return line.strip().lower() == self.exit_sentinel

    def run(self) -> None:
        """Loop until the sentinel is entered or input runs out."""
        safe_print(f"Chat loop started with {self.provider.name}")
        while True:
            try:
                line = self.read_line(PROMPT)
            except (EOFError, KeyboardInterrupt):
                self.write("")
                safe_print("Input closed. Leaving chat loop.")
                break

            if self.is_exit(line):
                self.write("Exiting...")
                break

            self.handle_line(line)

        safe_print(f"Chat loop finished after {self.turns} turn(s)")

    def handle_line(self, line: str) -> None:
        """Send one line to the provider and print the reply or the error."""
        if self.echo_input:
            self.write(f"You entered: {line}")

        self.turns += 1
        with request_context():
            try:
                reply = self.provider.send_message(line)
            except Exception as exc:
                safe_print(f"Turn {self.turns} failed: {exc!r}", logging.WARNING)
                self.write_error(f"Error: {exc}")
                return
        self.write(f"{self.provider.display_name}: {reply}")
