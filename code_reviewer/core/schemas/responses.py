"""Shared response schemas for API endpoints."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard API error response."""

    error: str
    details: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "OK"
    message: str = "Code Reviewer API is running!"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
