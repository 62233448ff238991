"""Pydantic schemas for reviewer service."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt


class Severity(str, Enum):
    """Severity bucket of a review issue."""

    CRITICAL = "critical"
    WARNING = "warning"
    SUGGESTION = "suggestion"


class ReviewRequest(BaseModel):
    """Request body for a snippet review."""

    model_config = ConfigDict(frozen=True)

    code: str = ""
    language: str = ""


class Issue(BaseModel):
    """A single problem reported by the model."""

    line: int = Field(ge=1)
    severity: Severity
    category: str
    title: str
    problem: str
    why: str
    fix: str


class Summary(BaseModel):
    """Issue counts per severity bucket."""

    critical: NonNegativeInt = 0
    warnings: NonNegativeInt = 0
    suggestions: NonNegativeInt = 0


class RawReview(BaseModel):
    """Upstream review JSON before coercion; every field may be missing or wrong."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    issues: Any = None
    fixed_code: Any = Field(default=None, alias="fixedCode")
    summary: Any = None


class ReviewResult(BaseModel):
    """Normalized review returned to the client."""

    model_config = ConfigDict(populate_by_name=True)

    issues: list[Any] = Field(default_factory=list)
    fixed_code: str = Field(alias="fixedCode")
    summary: Summary


class LanguagesResponse(BaseModel):
    """Language identifiers offered to clients."""

    languages: list[str]
