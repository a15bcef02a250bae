"""Hard eligibility filter for tuition grant applications.

An application is rejected when the GPA is below the minimum or the
shortfall is too small to warrant a grant. Everything else is shortlisted
for point scoring.
"""

from ..config.thresholds import DEFAULT_THRESHOLDS, ScoringThresholds
from ..models import ApplicationRecord, ApplicationStatus


def classify(
    gpa: float,
    shortfall: float,
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS,
) -> ApplicationStatus:
    """Classify a (GPA, shortfall) pair.

    Args:
        gpa: Grade point average
        shortfall: Tuition shortfall in dollars
        thresholds: Cut-offs to apply

    Returns:
        ApplicationStatus.REJECTED or ApplicationStatus.SHORTLISTED
    """
    if gpa < thresholds.min_gpa or shortfall < thresholds.min_shortfall:
        return ApplicationStatus.REJECTED
    return ApplicationStatus.SHORTLISTED


def assess_status(
    record: ApplicationRecord,
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS,
) -> ApplicationStatus:
    """Classify a stored application from its entered GPA and shortfall."""
    return classify(record.gpa, record.shortfall, thresholds)


def is_shortlisted(
    record: ApplicationRecord,
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS,
) -> bool:
    return assess_status(record, thresholds) is ApplicationStatus.SHORTLISTED
