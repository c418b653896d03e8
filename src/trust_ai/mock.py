"""Synthetic analysis results for when real data is unavailable."""

from __future__ import annotations

import logging
import random

from trust_ai.extractor import company_name_from_url
from trust_ai.models import SAMPLE_REVIEW_COUNT, AnalysisResult

logger = logging.getLogger(__name__)

MOCK_RED_FLAGS = [
    "Unable to fetch real data - using mock analysis",
    "API error occurred during analysis",
]
MOCK_SAMPLE_REVIEW = "Mock review - real data unavailable"
MOCK_RATING_DISTRIBUTION = "5★: 64%, 4★: 12%, 3★: 8%, 2★: 6%, 1★: 10%"


def generate_mock_analysis(
    url: str, rng: random.Random | None = None
) -> AnalysisResult:
    """Build a schema-valid, randomized AnalysisResult for a URL. Never raises."""
    rng = rng or random.Random()
    company = company_name_from_url(url)
    trust_score = rng.randint(0, 100)
    logger.info("Generating mock analysis with trust score: %d", trust_score)

    return AnalysisResult(
        company=company,
        trust_score=trust_score,
        red_flags=list(MOCK_RED_FLAGS),
        company_profile=f"Mock analysis for {company} due to technical issues.",
        number_of_fake_reviews=rng.randint(0, 49),
        total_reviews=rng.randint(100, 599),
        five_star_reviews=rng.randint(0, 199),
        single_reviewers=rng.randint(0, 99),
        generic_reviews=rng.randint(0, 79),
        short_reviews=rng.randint(0, 89),
        rating_distribution=MOCK_RATING_DISTRIBUTION,
        sample_reviews=[MOCK_SAMPLE_REVIEW] * SAMPLE_REVIEW_COUNT,
        average_rating=round(rng.uniform(3.0, 5.0), 1),
    )
