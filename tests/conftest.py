"""Shared fixtures for TrustAI tests."""

from __future__ import annotations

import pytest

from trust_ai.config import Settings


@pytest.fixture()
def settings() -> Settings:
    """Minimal settings with dummy keys for testing."""
    return Settings(
        openai_api_key="sk-test-openai-key",
        anthropic_api_key="test-anthropic-key",
        groq_api_key="test-groq-key",
        gemini_api_key="test-gemini-key",
    )


TRUSTPILOT_URL = "https://www.trustpilot.com/review/example.com"

SAMPLE_HTML = """\
<!DOCTYPE html>
<html>
<head>
    <title>Example Ltd Reviews | Read Customer Service Reviews of example.com</title>
</head>
<body>
    <h1>  Example Ltd  </h1>
    <p data-reviews-count-typography="true">Reviews 12,345</p>
    <p data-rating-typography="true">4.2 out of 5</p>
    <section>
        <p data-service-review-text-typography="true">Great service, highly recommended to everyone!</p>
        <p class="review-text">Too short</p>
        <div class="review-content">Delivery took three weeks and nobody answered my emails.</div>
        <p data-testid="review-text">   Would buy again, the support team was helpful.   </p>
    </section>
</body>
</html>
"""

NO_REVIEWS_HTML = """\
<html>
<head><title>Acme | Reviews</title></head>
<body><div class="hero">Nothing to see here</div></body>
</html>
"""

SAMPLE_AI_RESPONSE = """\
Here is the result: {
    "company": "Acme",
    "trust_score": 85,
    "risk_level": "red",
    "red_flags": ["Several near-identical five star reviews"],
    "company_profile": "Acme sells widgets online.",
    "number_of_fake_reviews": 12,
    "Total_reviews": 150,
    "5-Star Reviews": 90,
    "Single Reviewers": 15,
    "Generic Reviews": 10,
    "Short Reviews": 20,
    "Rating Distribution": "5★: 60%, 4★: 20%, 3★: 10%, 2★: 5%, 1★: 5%",
    "Sample Reviews": ["Great", "Good", "Fine", "Bad"],
    "Average Rating": 4.3
} Thanks!
"""
