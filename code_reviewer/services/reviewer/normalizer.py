"""Coerce raw LLM completions into the review contract."""

import json
from typing import Any, Optional

from pydantic import ValidationError

from code_reviewer.core.exceptions import EmptyUpstreamResponseError, MalformedUpstreamJSONError
from code_reviewer.core.logging import get_logger
from code_reviewer.services.reviewer.schemas import (
    Issue,
    RawReview,
    ReviewResult,
    Severity,
    Summary,
)

logger = get_logger("reviewer.normalizer")


def count_by_severity(issues: list[Any]) -> Summary:
    """Count issues per severity bucket. Unknown or missing severities are skipped."""
    counts = {severity.value: 0 for severity in Severity}
    for issue in issues:
        if not isinstance(issue, dict):
            continue
        severity = issue.get("severity")
        if isinstance(severity, str) and severity in counts:
            counts[severity] += 1

    return Summary(
        critical=counts[Severity.CRITICAL.value],
        warnings=counts[Severity.WARNING.value],
        suggestions=counts[Severity.SUGGESTION.value],
    )


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


def parse_completion(raw_text: Optional[str]) -> RawReview:
    """Parse completion text into the all-optional intermediate shape.

    Raises:
        EmptyUpstreamResponseError: If there is no text to parse
        MalformedUpstreamJSONError: If the text is not valid JSON, or decodes
            to strings that cannot be encoded as UTF-8
    """
    if not raw_text or not raw_text.strip():
        raise EmptyUpstreamResponseError()

    try:
        data = json.loads(raw_text, parse_constant=_reject_constant)
        # Lone surrogate escapes decode fine but cannot be sent back as UTF-8.
        json.dumps(data, ensure_ascii=False).encode("utf-8")
    except (ValueError, UnicodeEncodeError) as e:
        logger.error(f"JSON parse error: {e}")
        logger.error(f"AI returned this (which is not valid JSON): {raw_text!r}")
        raise MalformedUpstreamJSONError(raw_text) from e

    if not isinstance(data, dict):
        logger.warning(f"Expected a JSON object, got {type(data).__name__}; using defaults")
        return RawReview()

    return RawReview.model_validate(data)


def _coerce_issues(raw: RawReview) -> list[Any]:
    if not isinstance(raw.issues, list):
        if raw.issues is not None:
            logger.warning(f"Ignoring non-list issues value ({type(raw.issues).__name__})")
        return []

    nonconforming = 0
    for issue in raw.issues:
        try:
            Issue.model_validate(issue)
        except ValidationError:
            nonconforming += 1
    if nonconforming:
        logger.warning(f"{nonconforming}/{len(raw.issues)} issues do not match the issue schema")

    return list(raw.issues)


def _coerce_fixed_code(raw: RawReview, fallback_code: str) -> str:
    if isinstance(raw.fixed_code, str) and raw.fixed_code:
        return raw.fixed_code
    return fallback_code


def _coerce_summary(raw: RawReview, issues: list[Any]) -> Summary:
    counted = count_by_severity(issues)
    if raw.summary is None:
        return counted

    try:
        summary = Summary.model_validate(raw.summary, strict=True)
    except ValidationError:
        logger.warning(f"Invalid summary from model, recomputing: {raw.summary!r}")
        return counted

    if summary != counted:
        # Supplied summaries are returned as-is, only flagged.
        logger.warning(
            f"Model summary {summary.model_dump()} disagrees with issues {counted.model_dump()}"
        )
    return summary


def normalize(raw_text: Optional[str], fallback_code: str) -> ReviewResult:
    """Turn a raw completion into a fully populated ReviewResult.

    Args:
        raw_text: Completion text extracted from the provider envelope
        fallback_code: The submitted code, used when the model omits fixedCode

    Raises:
        EmptyUpstreamResponseError: If no completion text was returned
        MalformedUpstreamJSONError: If the completion is not valid JSON
    """
    raw = parse_completion(raw_text)

    issues = _coerce_issues(raw)
    return ReviewResult(
        issues=issues,
        fixed_code=_coerce_fixed_code(raw, fallback_code),
        summary=_coerce_summary(raw, issues),
    )
