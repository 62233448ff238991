"""Shared fixtures."""

from unittest.mock import MagicMock

import pytest

from code_reviewer.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, gemini_api_key="test-key")


@pytest.fixture
def fake_client():
    """Stand-in for GeminiClient; set ``generate.return_value`` per test."""
    client = MagicMock()
    client.generate.return_value = '{"issues": [], "fixedCode": "x = 1"}'
    return client
