"""Reviewer service - orchestration layer."""

from typing import Optional

from code_reviewer.config import Settings
from code_reviewer.core.exceptions import InvalidRequestError
from code_reviewer.core.logging import get_logger
from code_reviewer.core.prompts import build_review_prompt
from code_reviewer.services.gemini.client import GeminiClient
from code_reviewer.services.reviewer.normalizer import normalize
from code_reviewer.services.reviewer.schemas import ReviewRequest, ReviewResult

logger = get_logger("reviewer.service")

# Languages offered by the web client; others are accepted but logged.
KNOWN_LANGUAGES = (
    "javascript",
    "python",
    "java",
    "cpp",
    "go",
    "rust",
    "php",
    "typescript",
)


def validate_review_request(request: ReviewRequest) -> None:
    """Reject requests whose code or language is blank.

    Raises:
        InvalidRequestError: If either field is empty after trimming
    """
    if not request.code.strip() or not request.language.strip():
        raise InvalidRequestError()


class ReviewService:
    """Builds the prompt, calls the LLM once, and normalizes its answer."""

    def __init__(self, settings: Settings, client: Optional[GeminiClient] = None) -> None:
        self.settings = settings
        self.client = client or GeminiClient(settings)

    def review(self, request: ReviewRequest) -> ReviewResult:
        """Review a single code snippet."""
        validate_review_request(request)

        language = request.language.strip()
        if language.lower() not in KNOWN_LANGUAGES:
            logger.info(f"Reviewing unrecognized language '{language}'")

        logger.info(f"Analyzing {language} code ({len(request.code)} chars)")

        prompt = build_review_prompt(request.code, language)
        completion = self.client.generate(prompt)
        result = normalize(completion, fallback_code=request.code)

        logger.info(
            f"Analysis complete: {len(result.issues)} issues "
            f"({result.summary.critical} critical, {result.summary.warnings} warnings, "
            f"{result.summary.suggestions} suggestions)"
        )
        return result
