"""Summarize who contributes to GitHub repositories and organizations."""

__version__ = "0.1.0"
