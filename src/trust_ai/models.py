"""Pydantic models for the review analysis pipeline."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
)

SAMPLE_REVIEW_COUNT = 4
SAMPLE_REVIEW_PLACEHOLDER = "No review available"

# Lower bounds (inclusive) of each tier.
GREEN_THRESHOLD = 70
YELLOW_THRESHOLD = 40


class RiskLevel(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


def risk_level_for(trust_score: int) -> RiskLevel:
    """Map a 0-100 trust score onto its risk tier."""
    if trust_score >= GREEN_THRESHOLD:
        return RiskLevel.GREEN
    if trust_score >= YELLOW_THRESHOLD:
        return RiskLevel.YELLOW
    return RiskLevel.RED


class AnalysisRequest(BaseModel):
    """Inbound payload: a single target URL."""

    url: str = Field(default="", description="Review listing page to analyze")


class ExtractedPageFacts(BaseModel):
    """What the extractor pulls out of a fetched review page."""

    company: str = Field(description="Company name shown on the page")
    reviews: list[str] = Field(
        default_factory=list,
        description="Review texts in document order",
    )
    total_reviews: int | None = Field(
        default=None,
        description="Total review count shown on the page, if found",
    )
    average_rating: float | None = Field(
        default=None,
        description="Average star rating shown on the page, if found",
    )


class AnalysisResult(BaseModel):
    """
    Trust verdict for a company's reviews.

    The same schema is produced by the model and by the fallback generator.
    ``risk_level`` is always derived from ``trust_score``; any value supplied
    on input is ignored.
    """

    model_config = ConfigDict(populate_by_name=True)

    company: str = Field(default="Unknown Company")
    trust_score: int = Field(ge=0, le=100)
    red_flags: list[str] = Field(default_factory=list)
    company_profile: str = Field(default="")
    number_of_fake_reviews: int = Field(default=0, ge=0)
    total_reviews: int = Field(default=0, ge=0, alias="Total_reviews")
    five_star_reviews: int = Field(default=0, ge=0, alias="5-Star Reviews")
    single_reviewers: int = Field(default=0, ge=0, alias="Single Reviewers")
    generic_reviews: int = Field(default=0, ge=0, alias="Generic Reviews")
    short_reviews: int = Field(default=0, ge=0, alias="Short Reviews")
    rating_distribution: str = Field(default="", alias="Rating Distribution")
    sample_reviews: list[str] = Field(
        default_factory=list, alias="Sample Reviews", validate_default=True
    )
    average_rating: float = Field(default=0.0, ge=0, alias="Average Rating")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def risk_level(self) -> RiskLevel:
        return risk_level_for(self.trust_score)

    @field_validator("sample_reviews")
    @classmethod
    def _exactly_four_samples(cls, value: list[str]) -> list[str]:
        samples = list(value[:SAMPLE_REVIEW_COUNT])
        while len(samples) < SAMPLE_REVIEW_COUNT:
            samples.append(SAMPLE_REVIEW_PLACEHOLDER)
        return samples

    def to_wire(self) -> dict:
        """Dump with the literal wire key spellings."""
        return self.model_dump(by_alias=True, mode="json")


class AnalysisOutcome(BaseModel):
    """An AnalysisResult tagged with whether it came from real data."""

    source: Literal["real", "synthetic"]
    result: AnalysisResult
    fallback_reason: str | None = None

    @property
    def is_synthetic(self) -> bool:
        return self.source == "synthetic"

    @classmethod
    def real(cls, result: AnalysisResult) -> AnalysisOutcome:
        return cls(source="real", result=result)

    @classmethod
    def synthetic(cls, result: AnalysisResult, reason: str) -> AnalysisOutcome:
        return cls(source="synthetic", result=result, fallback_reason=reason)
