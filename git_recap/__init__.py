"""Summarize recent git history with an LLM."""

__version__ = "0.1.0"
