"""In-memory application store."""

import logging
from typing import Iterator, Tuple

from ..errors import CapacityExceeded
from ..models import ApplicationRecord

logger = logging.getLogger(__name__)

MAX_APPLICATIONS = 5000


class ApplicationStore:
    """Ordered, append-only collection of applications with a fixed capacity.

    Records live for the duration of the process. Sequence indexes are dense
    and match insertion order.
    """

    def __init__(self, capacity: int = MAX_APPLICATIONS):
        """Initialize an empty store.

        Args:
            capacity: Maximum number of applications accepted
        """
        if capacity < 1:
            raise ValueError(f"Capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._records: list[ApplicationRecord] = []

    def add(self, name: str, gpa: float, shortfall: float) -> int:
        """Append a new application.

        The caller is responsible for re-prompting on an empty name; the
        record model rejects one outright.

        Args:
            name: Student name
            gpa: Grade point average, 0.0 - 4.0
            shortfall: Tuition shortfall in dollars

        Returns:
            sequence_index of the new record

        Raises:
            CapacityExceeded: If the store already holds `capacity` records
        """
        if self.is_full():
            logger.warning("application_refused reason=capacity capacity=%d", self.capacity)
            raise CapacityExceeded(self.capacity)

        record = ApplicationRecord(
            sequence_index=len(self._records),
            student_name=name,
            gpa=gpa,
            shortfall=shortfall,
        )
        self._records.append(record)
        logger.debug(
            "application_added sequence=%d count=%d",
            record.sequence_index,
            len(self._records),
        )
        return record.sequence_index

    def count(self) -> int:
        """Number of stored applications."""
        return len(self._records)

    def records(self) -> Tuple[ApplicationRecord, ...]:
        """Stored applications in insertion order."""
        return tuple(self._records)

    def is_full(self) -> bool:
        return len(self._records) >= self.capacity

    def remaining(self) -> int:
        """Slots left before the store refuses new applications."""
        return self.capacity - len(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ApplicationRecord]:
        return iter(self.records())
