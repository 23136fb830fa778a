"""
Standard (uncustomized) Swedish holiday calculation.
"""

import calendar
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

from swedish_holidays.core.computus import easter_sunday
from swedish_holidays.core.range_search import find_weekday_in_range
from swedish_holidays.data.holiday_names import HOLIDAY_NAMES
from swedish_holidays.data.schemas import Holiday, HolidayKind, Language
from swedish_holidays.exceptions import InvalidArgumentError

# (month, day)
FIXED_DATES: Dict[HolidayKind, Tuple[int, int]] = {
    HolidayKind.NEW_YEARS_DAY: (1, 1),
    HolidayKind.EPIPHANY_EVE: (1, 5),
    HolidayKind.EPIPHANY: (1, 6),
    HolidayKind.WALPURGIS_EVE: (4, 30),
    HolidayKind.MAY_DAY: (5, 1),
    HolidayKind.NATIONAL_DAY: (6, 6),
    HolidayKind.CHRISTMAS_EVE: (12, 24),
    HolidayKind.CHRISTMAS_DAY: (12, 25),
    HolidayKind.ST_STEPHENS_DAY: (12, 26),
    HolidayKind.NEW_YEARS_EVE: (12, 31),
}

# Days relative to Easter Sunday
EASTER_OFFSETS: Dict[HolidayKind, int] = {
    HolidayKind.MAUNDY_THURSDAY: -3,
    HolidayKind.GOOD_FRIDAY: -2,
    HolidayKind.EASTER_EVE: -1,
    HolidayKind.EASTER_SUNDAY: 0,
    HolidayKind.EASTER_MONDAY: 1,
    HolidayKind.ASCENSION_DAY: 39,
}

PENTECOST_AFTER_EASTER = 49

# Days relative to Pentecost
PENTECOST_OFFSETS: Dict[HolidayKind, int] = {
    HolidayKind.WHITSUN_EVE: -1,
    HolidayKind.PENTECOST: 0,
}

# (month, start day, end day, weekday); end < start continues into the next month
WEEKDAY_RANGES: Dict[HolidayKind, Tuple[int, int, int, int]] = {
    HolidayKind.MIDSUMMER_EVE: (6, 19, 25, calendar.FRIDAY),
    HolidayKind.MIDSUMMER_DAY: (6, 20, 26, calendar.SATURDAY),
    HolidayKind.ALL_SAINTS_EVE: (10, 30, 5, calendar.FRIDAY),
    HolidayKind.ALL_SAINTS_DAY: (10, 31, 6, calendar.SATURDAY),
}


def make_holiday(kind: HolidayKind, holiday_date: date, language: Language) -> Holiday:
    """Build the localized Holiday for a standard holiday kind."""
    if language is None:
        raise InvalidArgumentError("Language must not be None")
    name, description = HOLIDAY_NAMES[kind][Language.from_code(language)]
    return Holiday(date=holiday_date, name=name, description=description)


class StandardHolidayCalculator:
    """Calculates the textbook set of Swedish holidays for a year."""

    def easter_sunday(self, year: int) -> date:
        """Date of Easter Sunday for the year."""
        return easter_sunday(year)

    def holiday_date(self, kind: HolidayKind, year: int, easter: Optional[date] = None) -> date:
        """
        Resolve the date of a standard holiday.

        Args:
            kind: Holiday to resolve.
            year: Calendar year.
            easter: Precomputed Easter Sunday for the year, if available.

        Returns:
            Date of the holiday in the given year.
        """
        if kind in FIXED_DATES:
            month, day = FIXED_DATES[kind]
            return date(year, month, day)

        if kind in WEEKDAY_RANGES:
            month, start_day, end_day, weekday = WEEKDAY_RANGES[kind]
            return find_weekday_in_range(year, month, start_day, end_day, weekday)

        if easter is None:
            easter = easter_sunday(year)
        if kind in EASTER_OFFSETS:
            return easter + timedelta(days=EASTER_OFFSETS[kind])

        pentecost = easter + timedelta(days=PENTECOST_AFTER_EASTER)
        return pentecost + timedelta(days=PENTECOST_OFFSETS[kind])

    def get_holiday(self, kind: HolidayKind, year: int, language: Language) -> Holiday:
        """
        Get a single standard holiday.

        Args:
            kind: Holiday to build.
            year: Calendar year.
            language: Language for name and description.

        Returns:
            The localized Holiday.
        """
        if kind is None:
            raise InvalidArgumentError("Holiday kind must not be None")
        if language is None:
            raise InvalidArgumentError("Language must not be None")
        return make_holiday(HolidayKind(kind), self.holiday_date(HolidayKind(kind), year), language)

    def calculate_standard(self, year: int, language: Language) -> List[Holiday]:
        """
        Calculate all standard holidays for a year.

        The result is in calculation order: fixed dates, Easter-relative,
        Pentecost-relative, then weekday-range holidays. It is not sorted.

        Args:
            year: Calendar year.
            language: Language for names and descriptions.

        Returns:
            List of the 22 standard holidays.
        """
        if language is None:
            raise InvalidArgumentError("Language must not be None")

        easter = easter_sunday(year)
        return [
            make_holiday(kind, self.holiday_date(kind, year, easter), language)
            for kind in HolidayKind
        ]
