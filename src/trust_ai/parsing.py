"""Recover an AnalysisResult from free-form model output."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from trust_ai.models import AnalysisResult

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Raised when model output holds no usable AnalysisResult."""


def extract_json_span(text: str) -> str:
    """
    Return the text from the first '{' to the last '}'.

    This is a greedy span, not a brace matcher: unrelated braces before
    or after the real object end up inside the span and break the parse.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        raise ParseError("Could not find JSON in AI response")
    return text[start:end + 1]


def parse_analysis(text: str) -> AnalysisResult:
    """Parse model output into an AnalysisResult with a recomputed risk level."""
    span = extract_json_span(text)
    try:
        payload = json.loads(span)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Malformed JSON in AI response: {exc}") from exc
    if not isinstance(payload, dict):
        raise ParseError("AI response JSON is not an object")

    try:
        result = AnalysisResult.model_validate(payload)
    except ValidationError as exc:
        raise ParseError(f"AI response does not match the result schema: {exc}") from exc

    claimed = payload.get("risk_level")
    if claimed is not None and claimed != result.risk_level.value:
        logger.warning(
            "Model risk_level %r disagrees with trust_score %d; using %r",
            claimed, result.trust_score, result.risk_level.value,
        )
    logger.info("Parsed AI response, trust score: %d", result.trust_score)
    return result
