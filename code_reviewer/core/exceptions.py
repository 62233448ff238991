"""Custom API exceptions for the application."""


class ApiException(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        status_code: int,
        message: str,
        details: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.details = details
        super().__init__(message)


class InvalidRequestError(ApiException):
    """Review request is missing its code or language."""

    def __init__(self, message: str = "Missing code or language") -> None:
        super().__init__(400, message)


class EmptyUpstreamResponseError(ApiException):
    """The LLM returned no usable completion (empty or safety-blocked)."""

    def __init__(self) -> None:
        super().__init__(500, "No response from AI")


class MalformedUpstreamJSONError(ApiException):
    """The LLM completion could not be parsed as JSON.

    The raw text is kept on the exception for operator logging only; it is
    never part of the response body.
    """

    def __init__(self, raw_text: str) -> None:
        self.raw_text = raw_text
        super().__init__(500, "Failed to parse AI response", "AI returned invalid JSON")


class UpstreamUnavailableError(ApiException):
    """Transport-level failure talking to the LLM provider."""

    def __init__(self, details: str | None = None) -> None:
        super().__init__(500, "AI analysis failed", details)
