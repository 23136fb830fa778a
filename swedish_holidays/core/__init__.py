"""
Core holiday calculation, customization and caching logic.
"""

from swedish_holidays.core.cache import ResultCache
from swedish_holidays.core.computus import easter_sunday
from swedish_holidays.core.customization import CustomizationStore
from swedish_holidays.core.engine import HolidayEngine
from swedish_holidays.core.range_search import find_weekday_in_range
from swedish_holidays.core.standard import StandardHolidayCalculator
from swedish_holidays.core.temporal import REFERENCE_TIMEZONE, to_reference_date

__all__ = [
    "CustomizationStore",
    "HolidayEngine",
    "REFERENCE_TIMEZONE",
    "ResultCache",
    "StandardHolidayCalculator",
    "easter_sunday",
    "find_weekday_in_range",
    "to_reference_date",
]
