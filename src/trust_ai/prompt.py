"""Prompt template for the review authenticity verdict."""

from __future__ import annotations

import json

from trust_ai.models import SAMPLE_REVIEW_COUNT, ExtractedPageFacts

UNKNOWN = "Unknown"
NO_REVIEWS_CLAUSE = "No reviews extracted - analyze based on URL pattern"

# Example values shown in the output schema when the page gave us nothing.
EXAMPLE_TOTAL_REVIEWS = 150
EXAMPLE_AVERAGE_RATING = 4.3

ANALYSIS_PROMPT = """\
You are an expert at analyzing Trustpilot reviews for authenticity.

COMPANY: {company}
URL: {url}
TOTAL REVIEWS: {total_reviews}
AVERAGE RATING: {average_rating}

ACTUAL REVIEWS TO ANALYZE:
{review_list}

Please analyze these REAL reviews for patterns of fake reviews such as:
- Too many 5-star reviews in a short time period
- Very short and simple written reviews
- Copy-paste reviews with similar wording
- Reviewers with only 1 review on their profile
- Sudden spikes of 5 star reviews activity
- Generic promotional language like "Great service, highly recommended"
- Reviews that look suspiciously similar
- Reviewer profiles that seem fake or newly created

Based on your analysis of the ACTUAL CONTENT above, assign a trust score between 0 and 100 where:
- 70-100: Reviews appear mostly genuine (green risk level)
- 40-69: Mixed signals, some suspicious activity (yellow risk level)
- 0-39: High risk of fake reviews (red risk level)

Return results in this exact JSON format (no additional text):
{{
  "company": {company_json},
  "trust_score": 75,
  "risk_level": "green",
  "red_flags": ["Specific red flag based on actual analysis", "Another specific red flag"],
  "company_profile": {profile_json},
  "number_of_fake_reviews": 25,
  "Total_reviews": {example_total},
  "5-Star Reviews": 90,
  "Single Reviewers": 15,
  "Generic Reviews": 10,
  "Short Reviews": 20,
  "Rating Distribution": "5★: 60%, 4★: 20%, 3★: 10%, 2★: 5%, 1★: 5%",
  "Sample Reviews": {samples_json},
  "Average Rating": {example_rating}
}}"""


def format_review_list(reviews: list[str]) -> str:
    """Number and quote each review, one per line."""
    if not reviews:
        return NO_REVIEWS_CLAUSE
    return "\n".join(f'{i}. "{review}"' for i, review in enumerate(reviews, 1))


def build_prompt(facts: ExtractedPageFacts, url: str) -> str:
    """Render the analysis prompt. Same inputs always give the same string."""
    samples = [
        facts.reviews[i] if i < len(facts.reviews) else f"Sample review {i + 1}"
        for i in range(SAMPLE_REVIEW_COUNT)
    ]
    profile = (
        f"Brief description of {facts.company} and their business based on the reviews"
    )
    return ANALYSIS_PROMPT.format(
        company=facts.company,
        url=url,
        total_reviews=facts.total_reviews or UNKNOWN,
        average_rating=facts.average_rating or UNKNOWN,
        review_list=format_review_list(facts.reviews),
        company_json=json.dumps(facts.company, ensure_ascii=False),
        profile_json=json.dumps(profile, ensure_ascii=False),
        example_total=facts.total_reviews or EXAMPLE_TOTAL_REVIEWS,
        samples_json=json.dumps(samples, ensure_ascii=False),
        example_rating=facts.average_rating or EXAMPLE_AVERAGE_RATING,
    )
