"""Error taxonomy for Timespan parsing."""

from __future__ import annotations

from enum import Enum, auto


class TimespanErrorType(Enum):
    """Enumeration of the ways a Timespan string can fail to parse."""
    MISPLACED_SIGN = auto()
    MISSING_COEFFICIENT = auto()
    UNPARSEABLE_COEFFICIENT = auto()
    UNRECOGNIZED_MAGNITUDE = auto()
    INDETERMINATE_ORDER = auto()
    MAGNITUDE_RESTATED = auto()
    MAGNITUDE_OUT_OF_ORDER = auto()
    NO_VALUE_DERIVED = auto()
    BAD_DURATION = auto()


class TimespanError(ValueError):
    """Raised when a Timespan string cannot be parsed.

    Attributes:
        error_type: The TimespanErrorType identifying the failure
        message: Human-readable description of the failure
        timespan: The full input string, once the driver has attached it
    """

    def __init__(self, error_type: TimespanErrorType, message: str, timespan: str | None = None):
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.timespan = timespan

    def __str__(self) -> str:
        if not self.timespan:
            return self.message
        return f"parsing Timespan {self.timespan!r}: {self.message}"

    def __repr__(self) -> str:
        return f"TimespanError({self.error_type.name}, {self.message!r})"

    def with_timespan(self, text: str) -> TimespanError:
        """Attach the original input string and return self for re-raising."""
        self.timespan = text
        return self
