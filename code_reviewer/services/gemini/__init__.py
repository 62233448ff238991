"""Gemini service."""

from code_reviewer.services.gemini.client import GeminiClient, extract_completion_text

__all__ = [
    "GeminiClient",
    "extract_completion_text",
]
