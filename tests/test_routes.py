"""Tests for the HTTP layer."""

import pytest
from fastapi.testclient import TestClient

from code_reviewer.core.exceptions import UpstreamUnavailableError
from code_reviewer.main import app
from code_reviewer.services.reviewer.routes import get_review_service
from code_reviewer.services.reviewer.service import ReviewService


@pytest.fixture
def http(test_settings, fake_client):
    app.dependency_overrides[get_review_service] = lambda: ReviewService(
        test_settings, client=fake_client
    )
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


class TestReviewEndpoint:
    """Tests for POST /api/review."""

    def test_success(self, http, fake_client):
        """A review comes back with camelCase fixedCode and a summary."""
        fake_client.generate.return_value = (
            '{"issues":[{"line":1,"severity":"suggestion","category":"style","title":"x",'
            '"problem":"p","why":"w","fix":"f"}],"fixedCode":"console.log(1);"}'
        )

        response = http.post(
            "/api/review", json={"code": "console.log(1)", "language": "javascript"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "issues": [
                {
                    "line": 1,
                    "severity": "suggestion",
                    "category": "style",
                    "title": "x",
                    "problem": "p",
                    "why": "w",
                    "fix": "f",
                }
            ],
            "fixedCode": "console.log(1);",
            "summary": {"critical": 0, "warnings": 0, "suggestions": 1},
        }

    @pytest.mark.parametrize(
        "body",
        [
            {"code": "", "language": "python"},
            {"code": "   ", "language": "python"},
            {"code": "x = 1"},
            {"language": "python"},
            {},
            {"code": None, "language": "python"},
            {"code": ["x"], "language": "python"},
        ],
    )
    def test_invalid_body(self, http, fake_client, body):
        """Missing or blank fields are a 400 without an outbound call."""
        response = http.post("/api/review", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing code or language"}
        assert fake_client.generate.call_count == 0

    def test_non_json_body(self, http, fake_client):
        """A body that is not JSON is a 400."""
        response = http.post(
            "/api/review", content="code=x", headers={"Content-Type": "text/plain"}
        )

        assert response.status_code == 400
        assert fake_client.generate.call_count == 0

    def test_empty_upstream(self, http, fake_client):
        """No completion maps to a 500 without details."""
        fake_client.generate.return_value = None

        response = http.post("/api/review", json={"code": "x", "language": "python"})

        assert response.status_code == 500
        assert response.json() == {"error": "No response from AI"}

    def test_malformed_upstream_does_not_echo_text(self, http, fake_client):
        """Unparseable completions are a 500 that hides the raw text."""
        fake_client.generate.return_value = '{"issues":[ secret partial'

        response = http.post("/api/review", json={"code": "x", "language": "python"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to parse AI response",
            "details": "AI returned invalid JSON",
        }
        assert "secret" not in response.text

    @pytest.mark.parametrize(
        "completion",
        [
            '{"issues":[{"line": NaN, "severity": "warning"}], "fixedCode": "y"}',
            '{"issues":[], "fixedCode": "a\\ud800b"}',
        ],
    )
    def test_completion_that_is_not_strict_json(self, http, fake_client, completion):
        """Non-standard constants and lone surrogates are parse failures, not a 200."""
        fake_client.generate.return_value = completion

        response = http.post("/api/review", json={"code": "x", "language": "python"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to parse AI response",
            "details": "AI returned invalid JSON",
        }

    def test_upstream_unavailable(self, http, fake_client):
        """Transport failures forward the provider message."""
        fake_client.generate.side_effect = UpstreamUnavailableError("API key not valid")

        response = http.post("/api/review", json={"code": "x", "language": "python"})

        assert response.status_code == 500
        assert response.json() == {"error": "AI analysis failed", "details": "API key not valid"}

    def test_unclassified_error(self, http, fake_client):
        """Unexpected exceptions become a generic server error."""
        fake_client.generate.side_effect = RuntimeError("boom")

        response = http.post("/api/review", json={"code": "x", "language": "python"})

        assert response.status_code == 500
        assert response.json() == {"error": "Server error"}


class TestOtherEndpoints:
    """Tests for health, root and languages endpoints."""

    def test_health(self, http):
        """Health returns a static OK payload with a timestamp."""
        response = http.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "OK"
        assert body["message"] == "Code Reviewer API is running!"
        assert "timestamp" in body

    def test_root(self, http):
        """Root describes the service."""
        assert http.get("/").json()["service"] == "code-reviewer"

    def test_languages(self, http):
        """Known languages are listed."""
        response = http.get("/api/languages")

        assert response.status_code == 200
        assert "javascript" in response.json()["languages"]
        assert "python" in response.json()["languages"]
