"""Command-line entry point: ``llm-switcher <gpt-4|claude>``."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from llm_switcher.chat import ChatLoop
from llm_switcher.core.log import safe_print, setup_logging
from llm_switcher.providers import UnknownModelError, get_provider, list_providers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="llm-switcher",
        description="Chat with OpenAI GPT-4 or Anthropic Claude from the terminal",
    )
    parser.add_argument(
        "model",
        nargs="?",
        help=f"Model to chat with ({' or '.join(list_providers())}, case-insensitive)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the chat CLI and return the process exit status."""
    load_dotenv()
    try:
        setup_logging()
    except ValidationError as exc:
        print(f"Error: invalid settings: {exc}", file=sys.stderr)
        return 1

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.model:
        print(f"Please specify the LLM model to use ({' or '.join(list_providers())})")
        parser.print_usage()
        return 1

    try:
        provider = get_provider(args.model)
    except UnknownModelError as exc:
        safe_print(str(exc), logging.ERROR)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    safe_print(f"Selected provider {provider.name}")
    print(f"Using LLM: {provider.display_name}")
    ChatLoop(provider).run()
    return 0


def run() -> None:
    """Console-script wrapper around :func:`main`."""
    sys.exit(main())
