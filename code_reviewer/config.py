"""Configuration for the Code Reviewer API."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # App
    environment: str = Field(default="development")
    debug: bool = Field(default=False)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001)
    allowed_origins: str = Field(default="*")
    log_level: Optional[str] = Field(default=None)

    # LLM - Gemini
    gemini_api_key: Optional[str] = Field(default=None)
    gemini_model: str = Field(default="gemini-2.5-flash")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta"
    )

    # Review Configuration
    review_temperature: float = Field(default=0.4, ge=0.0, le=2.0)
    review_max_output_tokens: int = Field(default=8192, gt=0)
    request_timeout_seconds: float = Field(default=60.0, gt=0)

    @property
    def cors_origins(self) -> list[str]:
        """ALLOWED_ORIGINS split on commas."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


settings = Settings()
