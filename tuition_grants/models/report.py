"""Report models for the summary and grant awardee screens."""

from pydantic import BaseModel, Field

from .application import ApplicationStatus
from .scoring_result import AwardTier


class SummaryEntry(BaseModel):
    """One application line in the summary report."""

    application_number: str = Field(..., description="Displayed number, e.g. UL1000")
    student_name: str
    shortfall: float
    status: ApplicationStatus


class ShortfallStatistics(BaseModel):
    """Aggregate shortfall figures over every stored application.

    All values are 0 when there are no applications.
    """

    count: int = Field(default=0, ge=0)
    total: float = Field(default=0.0, ge=0.0)
    average: float = Field(default=0.0, ge=0.0)
    minimum: float = Field(default=0.0, ge=0.0)
    maximum: float = Field(default=0.0, ge=0.0)


class SummaryReport(BaseModel):
    """Summary of all applications, rejected ones included."""

    count: int = Field(..., ge=0, description="Number of stored applications")
    entries: list[SummaryEntry] = Field(default_factory=list)
    statistics: ShortfallStatistics = Field(default_factory=ShortfallStatistics)

    @property
    def is_empty(self) -> bool:
        return self.count == 0


class AwardeeEntry(BaseModel):
    """One shortlisted application in the awardee report."""

    application_number: str
    student_name: str
    gpa_points: int
    shortfall_points: int
    total_points: int
    award_tier: AwardTier
    grant_amount: float


class AwardeeReport(BaseModel):
    """Grant awardees in insertion order."""

    entries: list[AwardeeEntry] = Field(default_factory=list)

    @property
    def has_grants(self) -> bool:
        return bool(self.entries)
