"""Code Reviewer API - FastAPI entry point."""

import sys

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from code_reviewer.config import settings
from code_reviewer.core.exceptions import ApiException, InvalidRequestError
from code_reviewer.core.logging import get_logger
from code_reviewer.core.schemas.responses import ErrorResponse, HealthResponse
from code_reviewer.services.reviewer.routes import router as reviewer_router

logger = get_logger("main")

app = FastAPI(
    title="Code Reviewer API",
    description="AI-powered code snippet reviewer",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, details=details).model_dump(exclude_none=True),
    )


@app.exception_handler(ApiException)
async def api_exception_handler(request: Request, exc: ApiException) -> JSONResponse:
    """Handle custom API exceptions and return structured error response."""
    logger.warning(f"API error: {exc.message} (status={exc.status_code}, details={exc.details})")
    return _error_response(exc.status_code, exc.message, exc.details)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as invalid review requests."""
    logger.warning(f"Invalid request body: {exc.errors()}")
    error = InvalidRequestError()
    return _error_response(error.status_code, error.message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map anything unclassified to a generic server error."""
    logger.opt(exception=exc).error(f"Server error on {request.method} {request.url.path}")
    return _error_response(500, "Server error")


# Include routes
app.include_router(reviewer_router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "code-reviewer",
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()


if __name__ == "__main__":
    import uvicorn

    if not settings.gemini_api_key:
        logger.error("GEMINI_API_KEY not found. Add it to the environment or a .env file.")
        sys.exit(1)

    logger.info(f"Starting Code Reviewer API on {settings.host}:{settings.port}")
    uvicorn.run(
        "code_reviewer.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
