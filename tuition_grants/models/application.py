"""ApplicationRecord - one student's tuition grant application."""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


DEFAULT_NUMBER_PREFIX = "UL"
DEFAULT_NUMBER_OFFSET = 1000


class ApplicationStatus(str, Enum):
    """Eligibility status of an application.

    UNSET until the summary pass classifies the record.
    """

    UNSET = "UNSET"
    REJECTED = "REJECTED"
    SHORTLISTED = "SHORTLISTED"


class ApplicationRecord(BaseModel):
    """A single application held by the ApplicationStore.

    The entered fields are frozen. Status and points are derived fields,
    recomputed by every summary/awardee pass.
    """

    # Entered fields
    sequence_index: int = Field(..., ge=0, frozen=True, description="0-based insertion order")
    student_name: str = Field(..., min_length=1, frozen=True, description="Student name as entered")
    gpa: float = Field(..., ge=0.0, le=4.0, frozen=True, description="Grade point average")
    shortfall: float = Field(..., ge=0.0, frozen=True, description="Tuition shortfall in dollars")

    # Derived fields
    status: ApplicationStatus = Field(default=ApplicationStatus.UNSET, description="Eligibility status")
    gpa_points: int = Field(default=0, ge=0, description="Points awarded for GPA")
    shortfall_points: int = Field(default=0, ge=0, description="Points awarded for shortfall")
    total_points: int = Field(default=0, ge=0, description="gpa_points + shortfall_points")

    def application_number(
        self,
        prefix: str = DEFAULT_NUMBER_PREFIX,
        offset: int = DEFAULT_NUMBER_OFFSET,
    ) -> str:
        """Displayed application number, e.g. UL1000 for the first record."""
        return f"{prefix}{offset + self.sequence_index}"

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "sequence_index": 0,
                "student_name": "Alice",
                "gpa": 3.6,
                "shortfall": 15000.0,
                "status": "SHORTLISTED",
                "gpa_points": 80,
                "shortfall_points": 80,
                "total_points": 160,
            }
        },
    )
