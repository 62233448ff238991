#!/usr/bin/env python3
"""Run a snippet review locally against the configured Gemini model."""
import argparse
import json
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from code_reviewer.config import Settings
from code_reviewer.core.exceptions import ApiException
from code_reviewer.services.reviewer.schemas import ReviewRequest
from code_reviewer.services.reviewer.service import ReviewService

EXTENSION_LANGUAGES = {
    ".js": "javascript",
    ".py": "python",
    ".java": "java",
    ".cpp": "cpp",
    ".go": "go",
    ".rs": "rust",
    ".php": "php",
    ".ts": "typescript",
}


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", type=Path, help="file to review")
    parser.add_argument("--language", help="language tag (default: from file extension)")
    args = parser.parse_args()

    language = args.language or EXTENSION_LANGUAGES.get(args.path.suffix.lower(), "")
    request = ReviewRequest(code=args.path.read_text(encoding="utf-8"), language=language)

    try:
        result = ReviewService(Settings()).review(request)
    except ApiException as e:
        raise SystemExit(f"Review failed: {e.message}" + (f" ({e.details})" if e.details else ""))

    print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))


if __name__ == "__main__":
    main()
