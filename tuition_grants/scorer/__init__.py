"""Point-based scoring engine for tuition grant applications."""

from .engine import award_tier, gpa_points, score_application, shortfall_points
from ..config.thresholds import DEFAULT_THRESHOLDS, ScoringThresholds, load_thresholds

__all__ = [
    "score_application",
    "gpa_points",
    "shortfall_points",
    "award_tier",
    "DEFAULT_THRESHOLDS",
    "ScoringThresholds",
    "load_thresholds",
]
