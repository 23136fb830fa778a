"""
Data models and static holiday data for the Swedish holiday calculator.
"""

from swedish_holidays.data.schemas import (
    Config,
    CustomizationSnapshot,
    Holiday,
    HolidayKind,
    HolidayRule,
    Language,
)

__all__ = [
    "Config",
    "CustomizationSnapshot",
    "Holiday",
    "HolidayKind",
    "HolidayRule",
    "Language",
]
