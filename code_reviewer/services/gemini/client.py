"""Gemini API client - data layer."""

from typing import Any, Optional

import requests

from code_reviewer.config import Settings
from code_reviewer.core.exceptions import UpstreamUnavailableError
from code_reviewer.core.logging import get_logger

logger = get_logger("gemini.client")

HARM_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)


def extract_completion_text(envelope: Any) -> Optional[str]:
    """Pull ``candidates[0].content.parts[0].text`` out of a response envelope.

    Returns None for any other shape, including safety-blocked responses that
    carry no candidates.
    """
    if not isinstance(envelope, dict):
        return None

    candidates = envelope.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        feedback = envelope.get("promptFeedback") or {}
        if isinstance(feedback, dict) and feedback.get("blockReason"):
            logger.warning(f"Prompt blocked by Gemini: {feedback['blockReason']}")
        return None

    candidate = candidates[0]
    if not isinstance(candidate, dict):
        return None

    content = candidate.get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        logger.warning(f"Candidate has no content parts (finishReason={candidate.get('finishReason')})")
        return None

    text = parts[0].get("text")
    return text if isinstance(text, str) else None


def _error_message(response: requests.Response) -> Optional[str]:
    """Provider diagnostic from an error body (``{"error": {"message": ...}}``)."""
    try:
        body = response.json()
    except ValueError:
        return None
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return None


class GeminiClient:
    """Blocking client for the Gemini ``generateContent`` endpoint."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None) -> None:
        if not settings.gemini_api_key:
            raise ValueError("GEMINI_API_KEY not configured")

        self.settings = settings
        self.url = (
            f"{settings.gemini_base_url.rstrip('/')}/models/"
            f"{settings.gemini_model}:generateContent"
        )
        self.headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": settings.gemini_api_key,
        }
        # Shared across worker threads for connection pooling only; request
        # state (headers, body, timeout) is passed per call and the session is
        # never mutated after construction.
        self.session = session or requests.Session()

        logger.info(f"[LLM] Using Gemini: {settings.gemini_model}")

    def build_payload(self, prompt: str) -> dict:
        """Request body: prompt, decoding parameters and relaxed safety thresholds."""
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.settings.review_temperature,
                "maxOutputTokens": self.settings.review_max_output_tokens,
                "responseMimeType": "application/json",
            },
            "safetySettings": [
                {"category": category, "threshold": "BLOCK_NONE"}
                for category in HARM_CATEGORIES
            ],
        }

    def generate(self, prompt: str) -> Optional[str]:
        """Send one prompt and return the completion text, or None if there is none.

        Raises:
            UpstreamUnavailableError: On non-2xx status, network error or timeout
        """
        try:
            response = self.session.post(
                self.url,
                headers=self.headers,
                json=self.build_payload(prompt),
                timeout=self.settings.request_timeout_seconds,
            )
        except requests.Timeout as e:
            logger.error(f"Gemini request timed out: {e}")
            raise UpstreamUnavailableError("Request to AI service timed out") from e
        except requests.RequestException as e:
            logger.error(f"Gemini request failed: {e}")
            raise UpstreamUnavailableError("Could not reach AI service") from e

        if not response.ok:
            logger.error(f"Gemini API error {response.status_code}: {response.text}")
            raise UpstreamUnavailableError(_error_message(response))

        try:
            envelope = response.json()
        except ValueError:
            logger.error(f"Gemini returned a non-JSON envelope: {response.text[:500]}")
            return None

        text = extract_completion_text(envelope)
        if text is None:
            logger.error(f"No content in AI response, full API response: {envelope}")
        return text
