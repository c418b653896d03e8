"""Fetch the raw HTML of a review page with a browser-like identity."""

from __future__ import annotations

import logging

import httpx

from trust_ai.config import Settings

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when the page could not be fetched."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def fetch_html(url: str, settings: Settings) -> str:
    """
    Fetch a page with a single GET request.

    No retries. Redirects are followed the way a browser would; any
    non-2xx final status raises FetchError carrying that status. A URL
    httpx refuses to build (e.g. a non-numeric port) is a FetchError too.
    """
    headers = {"User-Agent": settings.user_agent}

    try:
        with httpx.Client(
            timeout=settings.fetch_timeout, follow_redirects=True
        ) as client:
            response = client.get(url, headers=headers)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.error("Fetch failed for %s: %s", url, exc)
        raise FetchError(f"Failed to fetch {url}: {exc}") from exc

    if not response.is_success:
        logger.error("Fetch failed for %s: HTTP %d", url, response.status_code)
        raise FetchError(
            f"Failed to fetch page: {response.status_code}",
            status_code=response.status_code,
        )

    logger.info("Fetched %d bytes from %s", len(response.text), url)
    return response.text
