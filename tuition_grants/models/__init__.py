"""Shared Pydantic models for tuition grant applications."""

from .application import ApplicationRecord, ApplicationStatus
from .scoring_result import AwardTier, ScoringResult
from .report import (
    AwardeeEntry,
    AwardeeReport,
    ShortfallStatistics,
    SummaryEntry,
    SummaryReport,
)

__all__ = [
    "ApplicationRecord",
    "ApplicationStatus",
    "AwardTier",
    "ScoringResult",
    "AwardeeEntry",
    "AwardeeReport",
    "ShortfallStatistics",
    "SummaryEntry",
    "SummaryReport",
]
