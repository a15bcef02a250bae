"""Point-based scoring engine for shortlisted grant applications.

Two point sources, each worth up to 100:
1. GPA band: higher GPA earns more
2. Shortfall band: smaller shortfall earns more

The total selects the award tier.
"""

from typing import Optional

from ..config.thresholds import DEFAULT_THRESHOLDS, ScoringThresholds
from ..eligibility import classify
from ..models import ApplicationRecord, ApplicationStatus, AwardTier, ScoringResult


def score_application(
    record: ApplicationRecord,
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS,
) -> Optional[ScoringResult]:
    """Score an application from its entered GPA and shortfall.

    Classification is recomputed here rather than read from the record, so
    the result does not depend on whether a summary pass has run.

    Args:
        record: Application to score
        thresholds: Cut-offs and point tables to apply

    Returns:
        ScoringResult, or None when the application is rejected
    """

    if classify(record.gpa, record.shortfall, thresholds) is ApplicationStatus.REJECTED:
        return None

    points_from_gpa = gpa_points(record.gpa, thresholds)
    points_from_shortfall = shortfall_points(record.shortfall, thresholds)
    total = points_from_gpa + points_from_shortfall
    tier = award_tier(total, thresholds)

    return ScoringResult(
        sequence_index=record.sequence_index,
        gpa_points=points_from_gpa,
        shortfall_points=points_from_shortfall,
        total_points=total,
        award_tier=tier,
        grant_amount=round(record.shortfall * tier.coverage, 2),
        thresholds_version=thresholds.version,
    )


def gpa_points(gpa: float, thresholds: ScoringThresholds = DEFAULT_THRESHOLDS) -> int:
    """Points for a GPA.

    Default bands:
    - [2.5, 3.0): 20
    - [3.0, 3.5): 60
    - [3.5, 3.75): 80
    - 3.75 and above: 100

    A GPA below the lowest band earns 0. Such applications are always
    rejected first, so the value is never shown.
    """

    points = 0
    for lower_bound, band_points in thresholds.gpa_bands:
        if gpa >= lower_bound:
            points = band_points
        else:
            break
    return points


def shortfall_points(shortfall: float, thresholds: ScoringThresholds = DEFAULT_THRESHOLDS) -> int:
    """Points for a tuition shortfall.

    Default bands:
    - up to 10000: 100
    - (10000, 20000]: 80
    - (20000, 30000]: 60
    - (30000, 50000]: 20
    - above 50000: 0
    """

    for upper_bound, band_points in thresholds.shortfall_bands:
        if shortfall <= upper_bound:
            return band_points
    return thresholds.overflow_points


def award_tier(total_points: int, thresholds: ScoringThresholds = DEFAULT_THRESHOLDS) -> AwardTier:
    """Determine award tier from total points.

    Thresholds (defaults):
    - FULL_GRANT: above 160
    - PARTIAL_75: above 140
    - PARTIAL_50: everything else
    """

    if total_points > thresholds.full_grant_above:
        return AwardTier.FULL_GRANT
    elif total_points > thresholds.partial_grant_above:
        return AwardTier.PARTIAL_75
    else:
        return AwardTier.PARTIAL_50
