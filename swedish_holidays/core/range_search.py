"""
Weekday search within a short day range, used for Midsummer and All Saints.
"""

from datetime import date, timedelta

from swedish_holidays.exceptions import RangeSearchError


def find_weekday_in_range(
    year: int, start_month: int, start_day: int, end_day: int, weekday: int
) -> date:
    """
    Find the first date in an inclusive range that falls on a weekday.

    The range starts at (year, start_month, start_day). It ends on end_day of
    the same month, or of the following month when end_day < start_day.

    Args:
        year: Calendar year of the range start.
        start_month: Month of the range start (1-12).
        start_day: Day of month the range starts on.
        end_day: Day of month the range ends on.
        weekday: Target weekday, Monday=0 to Sunday=6 as in date.weekday().

    Returns:
        The first matching date.

    Raises:
        RangeSearchError: If no date in the range falls on the weekday.
    """
    current = date(year, start_month, start_day)
    if end_day >= start_day:
        last = date(year, start_month, end_day)
    elif start_month == 12:
        last = date(year + 1, 1, end_day)
    else:
        last = date(year, start_month + 1, end_day)

    while current <= last:
        if current.weekday() == weekday:
            return current
        current += timedelta(days=1)

    raise RangeSearchError(
        f"No weekday {weekday} between {date(year, start_month, start_day).isoformat()} "
        f"and {last.isoformat()}"
    )
