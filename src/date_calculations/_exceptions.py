class PeriodError(Exception):
    """Base exception for all date_calculations errors."""


class InvalidDateError(PeriodError, TypeError):
    """The value is not a calendar date (or array of dates) this library handles."""


class PeriodOverflowError(PeriodError, OverflowError):
    """Raised in strict mode when a period boundary falls outside the date range."""
