"""Code review routes."""

from functools import lru_cache

from fastapi import APIRouter, Depends

from code_reviewer.config import settings
from code_reviewer.services.reviewer.schemas import LanguagesResponse, ReviewRequest, ReviewResult
from code_reviewer.services.reviewer.service import KNOWN_LANGUAGES, ReviewService

router = APIRouter()


@lru_cache
def get_review_service() -> ReviewService:
    """Shared review service built from the process settings.

    The service keeps no per-request state; its HTTP session is only a
    connection pool.
    """
    return ReviewService(settings)


@router.post("/review", response_model=ReviewResult)
def review_code(
    request: ReviewRequest,
    service: ReviewService = Depends(get_review_service),
) -> ReviewResult:
    """Review a code snippet and return issues, fixed code and a summary."""
    return service.review(request)


@router.get("/languages", response_model=LanguagesResponse)
async def list_languages() -> LanguagesResponse:
    """Language identifiers offered to clients."""
    return LanguagesResponse(languages=list(KNOWN_LANGUAGES))
