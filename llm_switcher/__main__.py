"""Allow ``python -m llm_switcher``."""

from llm_switcher.cli import run

if __name__ == "__main__":
    run()
