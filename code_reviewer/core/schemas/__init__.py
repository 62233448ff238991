"""Core schemas for API responses."""

from code_reviewer.core.schemas.responses import ErrorResponse, HealthResponse

__all__ = ["ErrorResponse", "HealthResponse"]
