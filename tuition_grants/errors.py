"""Error taxonomy for application entry.

Every error here is recoverable: the console catches it at the point of
entry, tells the user what went wrong and asks again.
"""


class GrantApplicationError(Exception):
    """Base class for tuition grant application errors."""


class InvalidInputFormat(GrantApplicationError, ValueError):
    """Raised when text cannot be read as the expected kind of value."""


class OutOfDomain(GrantApplicationError, ValueError):
    """Raised when a value parses but falls outside its allowed range."""


class CapacityExceeded(GrantApplicationError):
    """Raised when the application store is already at capacity."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(
            f"Application store is full ({capacity} applications); cannot add more"
        )
