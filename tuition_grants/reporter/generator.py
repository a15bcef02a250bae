"""ApplicationReportGenerator - builds the summary and grant awardee reports."""

import logging
from typing import Iterable

from ..config.thresholds import DEFAULT_THRESHOLDS, ScoringThresholds
from ..eligibility import assess_status, is_shortlisted
from ..models import (
    ApplicationRecord,
    ApplicationStatus,
    AwardeeEntry,
    AwardeeReport,
    ShortfallStatistics,
    SummaryEntry,
    SummaryReport,
)
from ..models.application import DEFAULT_NUMBER_OFFSET, DEFAULT_NUMBER_PREFIX
from ..scorer import score_application
from ..store import ApplicationStore

logger = logging.getLogger(__name__)


class ApplicationReportGenerator:
    """Generates reports over every application in a store.

    Each report pass recomputes the derived fields from the entered GPA and
    shortfall and writes them back onto the records, so running a pass twice
    on an unchanged store gives the same report.
    """

    def __init__(
        self,
        store: ApplicationStore,
        thresholds: ScoringThresholds = DEFAULT_THRESHOLDS,
        number_prefix: str = DEFAULT_NUMBER_PREFIX,
        number_offset: int = DEFAULT_NUMBER_OFFSET,
    ):
        """Initialize generator.

        Args:
            store: Applications to report on.
            thresholds: Eligibility and scoring rules.
            number_prefix: Prefix of displayed application numbers.
            number_offset: Added to sequence_index for displayed numbers.
        """
        self.store = store
        self.thresholds = thresholds
        self.number_prefix = number_prefix
        self.number_offset = number_offset

    def summary(self) -> SummaryReport:
        """Classify every application and aggregate shortfall statistics.

        Returns:
            SummaryReport with one entry per application, rejected included.
        """
        records = self.store.records()
        entries = []
        for record in records:
            record.status = assess_status(record, self.thresholds)
            entries.append(
                SummaryEntry(
                    application_number=self._number(record),
                    student_name=record.student_name,
                    shortfall=record.shortfall,
                    status=record.status,
                )
            )

        report = SummaryReport(
            count=len(records),
            entries=entries,
            statistics=summarize_shortfalls(records),
        )
        logger.info(
            "summary_generated count=%d shortlisted=%d",
            report.count,
            sum(1 for record in records if is_shortlisted(record, self.thresholds)),
        )
        return report

    def awardees(self) -> AwardeeReport:
        """Score every application that passes the eligibility filter.

        Rejected applications are left at zero points and excluded.

        Returns:
            AwardeeReport in insertion order.
        """
        entries = []
        for record in self.store.records():
            result = score_application(record, self.thresholds)
            if result is None:
                record.status = ApplicationStatus.REJECTED
                record.gpa_points = 0
                record.shortfall_points = 0
                record.total_points = 0
                continue

            record.status = ApplicationStatus.SHORTLISTED
            record.gpa_points = result.gpa_points
            record.shortfall_points = result.shortfall_points
            record.total_points = result.total_points

            entries.append(
                AwardeeEntry(
                    application_number=self._number(record),
                    student_name=record.student_name,
                    gpa_points=result.gpa_points,
                    shortfall_points=result.shortfall_points,
                    total_points=result.total_points,
                    award_tier=result.award_tier,
                    grant_amount=result.grant_amount,
                )
            )

        logger.info("awardees_generated count=%d", len(entries))
        return AwardeeReport(entries=entries)

    def _number(self, record: ApplicationRecord) -> str:
        return record.application_number(self.number_prefix, self.number_offset)


def summarize_shortfalls(records: Iterable[ApplicationRecord]) -> ShortfallStatistics:
    """Total, average, minimum and maximum shortfall.

    Every value is 0 when there are no records.
    """
    shortfalls = [record.shortfall for record in records]
    if not shortfalls:
        return ShortfallStatistics()

    total = sum(shortfalls)
    return ShortfallStatistics(
        count=len(shortfalls),
        total=total,
        average=total / len(shortfalls),
        minimum=min(shortfalls),
        maximum=max(shortfalls),
    )
