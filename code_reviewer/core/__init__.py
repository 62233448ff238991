"""Shared library utilities."""

from code_reviewer.core.logging import get_logger
from code_reviewer.core.prompts import build_review_prompt

__all__ = [
    "build_review_prompt",
    "get_logger",
]
