"""Per-request analysis pipeline.

Fetch -> Extract -> Compose prompt -> Complete -> Parse

Every downstream failure degrades instead of raising: a failed fetch
falls back to a URL-derived company name, and a failed completion or
parse falls back to a synthetic result. Only a missing URL is reported
to the caller as an error.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from bs4.builder import ParserRejectedMarkup
from pydantic import ValidationError

from trust_ai.config import Settings
from trust_ai.extractor import company_name_from_url, extract_page_facts
from trust_ai.fetcher import FetchError, fetch_html
from trust_ai.mock import generate_mock_analysis
from trust_ai.models import AnalysisOutcome, AnalysisRequest, ExtractedPageFacts
from trust_ai.parsing import ParseError
from trust_ai.prompt import build_prompt
from trust_ai.providers import get_provider
from trust_ai.providers.base import CompletionError, ProviderConfigError

logger = logging.getLogger(__name__)

URL_REQUIRED = "URL is required"
ANALYSIS_FAILED = "Analysis failed"


class InputError(ValueError):
    """Raised when the request carries no URL."""


def gather_facts(url: str, settings: Settings) -> ExtractedPageFacts:
    """Fetch and extract the page, or fall back to what the URL tells us."""
    try:
        html = fetch_html(url, settings)
    except FetchError as exc:
        logger.warning("Failed to fetch page content (%s), using URL-based analysis", exc)
        return ExtractedPageFacts(company=company_name_from_url(url))
    try:
        return extract_page_facts(html, url, max_reviews=settings.max_reviews)
    except ParserRejectedMarkup as exc:
        logger.warning("Could not parse page content (%s), using URL-based analysis", exc)
        return ExtractedPageFacts(company=company_name_from_url(url))


def _synthetic(url: str, reason: str) -> AnalysisOutcome:
    logger.warning("Falling back to mock data: %s", reason)
    return AnalysisOutcome.synthetic(generate_mock_analysis(url), reason)


def analyze(
    url: str | None,
    provider_name: str | None = None,
    settings: Settings | None = None,
) -> AnalysisOutcome:
    """
    Run the full analysis for one URL.

    Args:
        url: Review listing page to analyze.
        provider_name: Completion provider. Defaults to settings.default_provider.

    Raises:
        InputError: if url is empty.
    """
    if not url or not url.strip():
        raise InputError(URL_REQUIRED)

    if settings is None:
        settings = Settings.from_env()
    provider_name = provider_name or settings.default_provider
    logger.info("Analyzing %s with %s", url, provider_name)

    try:
        provider = get_provider(provider_name, settings)
    except ProviderConfigError as exc:
        return _synthetic(url, f"no usable credential: {exc}")

    facts = gather_facts(url, settings)
    prompt = build_prompt(facts, url)

    try:
        result = provider.analyze(prompt)
    except CompletionError as exc:
        return _synthetic(url, f"completion failed: {exc}")
    except ParseError as exc:
        return _synthetic(url, f"unparseable completion: {exc}")

    logger.info(
        "Returning real analysis for %s: trust_score=%d risk_level=%s",
        result.company, result.trust_score, result.risk_level.value,
    )
    return AnalysisOutcome.real(result)


def handle_analyze_request(
    body: Mapping | None,
    provider_name: str | None = None,
    settings: Settings | None = None,
) -> tuple[dict, int]:
    """
    Serve an inbound ``{"url": ...}`` payload.

    Returns the JSON-ready response body and an HTTP-style status code.
    """
    try:
        request = AnalysisRequest.model_validate(body or {})
    except ValidationError:
        return {"error": URL_REQUIRED}, 400

    try:
        outcome = analyze(request.url, provider_name=provider_name, settings=settings)
    except InputError:
        return {"error": URL_REQUIRED}, 400
    except Exception:
        logger.exception("General error in analysis")
        return {"error": ANALYSIS_FAILED}, 500
    return outcome.result.to_wire(), 200
