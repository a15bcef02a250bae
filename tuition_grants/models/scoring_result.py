"""ScoringResult - points and award tier for a shortlisted application."""

from enum import Enum
from pydantic import BaseModel, Field


class AwardTier(str, Enum):
    """Share of the tuition shortfall covered by the grant."""

    FULL_GRANT = "FULL_GRANT"
    PARTIAL_75 = "PARTIAL_75"
    PARTIAL_50 = "PARTIAL_50"

    @property
    def coverage(self) -> float:
        """Fraction of the shortfall the grant pays."""
        return _COVERAGE[self]

    @property
    def message(self) -> str:
        """Award line shown in the awardee report."""
        return _MESSAGES[self]


_COVERAGE = {
    AwardTier.FULL_GRANT: 1.0,
    AwardTier.PARTIAL_75: 0.75,
    AwardTier.PARTIAL_50: 0.5,
}

_MESSAGES = {
    AwardTier.FULL_GRANT: "FULL GRANT AWARDED",
    AwardTier.PARTIAL_75: "GRANT IS ONLY FOR [ 75% ] OF SHORTFALL AWARDED",
    AwardTier.PARTIAL_50: "GRANT IS ONLY FOR [ 50% ] OF SHORTFALL AWARDED",
}


class ScoringResult(BaseModel):
    """Scoring output for one non-rejected application."""

    sequence_index: int = Field(..., ge=0, description="Links to ApplicationRecord.sequence_index")
    gpa_points: int = Field(..., ge=0, le=100, description="Points from GPA band")
    shortfall_points: int = Field(..., ge=0, le=100, description="Points from shortfall band")
    total_points: int = Field(..., ge=0, le=200, description="Sum of both point sources")
    award_tier: AwardTier = Field(..., description="Tier selected from total points")
    grant_amount: float = Field(..., ge=0.0, description="Shortfall covered by the award tier")
    thresholds_version: str = Field(default="1.0", description="ScoringThresholds version used")
