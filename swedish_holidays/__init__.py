"""
Swedish public holidays with runtime customization and caching.
"""

from swedish_holidays.core.engine import HolidayEngine
from swedish_holidays.data.schemas import Holiday, HolidayKind, HolidayRule, Language
from swedish_holidays.exceptions import (
    HolidayError,
    InvalidArgumentError,
    RangeSearchError,
    TemporalResolutionError,
)

__version__ = "0.1.0"

__all__ = [
    "Holiday",
    "HolidayEngine",
    "HolidayError",
    "HolidayKind",
    "HolidayRule",
    "InvalidArgumentError",
    "Language",
    "RangeSearchError",
    "TemporalResolutionError",
]
