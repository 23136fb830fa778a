"""
Exception hierarchy for the Swedish holiday calculator.

- InvalidArgumentError: required input missing or outside its contract
- RangeSearchError: a weekday search range contained no matching day
- TemporalResolutionError: a temporal value could not be turned into a date
"""

__all__ = [
    "HolidayError",
    "InvalidArgumentError",
    "RangeSearchError",
    "TemporalResolutionError",
]


class HolidayError(Exception):
    """Base exception for all holiday calculation errors."""


class InvalidArgumentError(HolidayError, ValueError):
    """Raised when a required argument is absent or out of range."""


class RangeSearchError(HolidayError, RuntimeError):
    """Raised when no date in a search range falls on the requested weekday."""


class TemporalResolutionError(HolidayError, ValueError):
    """Raised when a value yields neither a calendar date nor an instant."""
