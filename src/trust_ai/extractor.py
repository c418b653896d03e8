"""Pull company name, reviews and summary numbers out of a review page.

Each fact is located through an ordered list of CSS selectors; the first
one that matches wins. Missing facts are left empty rather than raising.
"""

from __future__ import annotations

import logging
import re
from typing import Callable
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from trust_ai.models import ExtractedPageFacts

logger = logging.getLogger(__name__)

UNKNOWN_COMPANY = "Unknown Company"

# Hosts whose /review/<domain> path names the reviewed company.
REVIEW_AGGREGATOR_HOSTS = ("trustpilot.com",)

REVIEW_TEXT_SELECTORS = (
    '[data-service-review-text-typography="true"]',
    ".review-content",
    ".review-text",
    '[data-testid="review-text"]',
)
REVIEW_COUNT_SELECTORS = (
    '[data-reviews-count-typography="true"]',
    ".review-count",
    '[data-testid="review-count"]',
)
RATING_SELECTORS = (
    '[data-rating-typography="true"]',
    ".average-rating",
    '[data-testid="rating"]',
)

MIN_REVIEW_CHARS = 10
DEFAULT_MAX_REVIEWS = 20

_GROUPED_INT_RE = re.compile(r"\d+(?:,\d+)*")
_DECIMAL_RE = re.compile(r"\d+\.?\d*")


def _capitalize_label(domain: str) -> str:
    """'example.com' -> 'Example'."""
    label = domain.split(".")[0]
    return label[:1].upper() + label[1:]


def company_name_from_url(url: str) -> str:
    """
    Guess the company name from a URL alone.

    Never raises and never returns an empty string.
    """
    try:
        parsed = urlparse(url)
        host = parsed.hostname or ""
    except (ValueError, TypeError, AttributeError):
        return UNKNOWN_COMPANY
    if not host:
        return UNKNOWN_COMPANY

    name = ""
    if any(marker in host for marker in REVIEW_AGGREGATOR_HOSTS):
        parts = parsed.path.split("/")
        if "review" in parts:
            idx = parts.index("review")
            if idx + 1 < len(parts) and parts[idx + 1]:
                name = _capitalize_label(parts[idx + 1])

    if not name:
        name = _capitalize_label(host.removeprefix("www."))
    return name or UNKNOWN_COMPANY


def _from_heading(soup: BeautifulSoup, url: str) -> str:
    h1 = soup.find("h1")
    return h1.get_text().strip() if h1 else ""


def _from_title(soup: BeautifulSoup, url: str) -> str:
    if soup.title is None:
        return ""
    return soup.title.get_text().split("|")[0].strip()


def _from_url(soup: BeautifulSoup, url: str) -> str:
    return company_name_from_url(url)


_COMPANY_STRATEGIES: list[Callable[[BeautifulSoup, str], str]] = [
    _from_heading,
    _from_title,
    _from_url,
]


def extract_company(soup: BeautifulSoup, url: str) -> str:
    for strategy in _COMPANY_STRATEGIES:
        name = strategy(soup, url)
        if name:
            return name
    return UNKNOWN_COMPANY


def extract_reviews(
    soup: BeautifulSoup, max_reviews: int = DEFAULT_MAX_REVIEWS
) -> list[str]:
    """Collect review texts longer than MIN_REVIEW_CHARS, in document order."""
    reviews: list[str] = []
    for el in soup.select(", ".join(REVIEW_TEXT_SELECTORS)):
        text = el.get_text().strip()
        if len(text) > MIN_REVIEW_CHARS:
            reviews.append(text)
    return reviews[:max_reviews]


def _first_match_text(soup: BeautifulSoup, selectors: tuple[str, ...]) -> str:
    el = soup.select_one(", ".join(selectors))
    return el.get_text() if el else ""


def extract_total_reviews(soup: BeautifulSoup) -> int | None:
    match = _GROUPED_INT_RE.search(_first_match_text(soup, REVIEW_COUNT_SELECTORS))
    if not match:
        return None
    return int(match.group(0).replace(",", ""))


def extract_average_rating(soup: BeautifulSoup) -> float | None:
    match = _DECIMAL_RE.search(_first_match_text(soup, RATING_SELECTORS))
    if not match:
        return None
    return float(match.group(0))


def extract_page_facts(
    html: str, url: str, max_reviews: int = DEFAULT_MAX_REVIEWS
) -> ExtractedPageFacts:
    """Parse a fetched review page into ExtractedPageFacts."""
    soup = BeautifulSoup(html, "html.parser")
    facts = ExtractedPageFacts(
        company=extract_company(soup, url),
        reviews=extract_reviews(soup, max_reviews=max_reviews),
        total_reviews=extract_total_reviews(soup),
        average_rating=extract_average_rating(soup),
    )
    logger.info(
        "Extracted page content: company=%s, reviews=%d, total=%s, rating=%s",
        facts.company,
        len(facts.reviews),
        facts.total_reviews,
        facts.average_rating,
    )
    return facts
