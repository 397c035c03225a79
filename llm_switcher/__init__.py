"""Terminal chat loop for OpenAI GPT-4 and Anthropic Claude."""

__version__ = "0.1.0"
