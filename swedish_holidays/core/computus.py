"""
Easter Sunday calculation (computus).
"""

from datetime import date

from swedish_holidays.exceptions import InvalidArgumentError


def easter_sunday(year: int) -> date:
    """
    Calculate the date of Easter Sunday in the Gregorian calendar.

    Uses the anonymous Gregorian algorithm (Meeus/Jones/Butcher). Years
    before the Gregorian reform are still computed with the same formula.

    Args:
        year: Calendar year, must be positive.

    Returns:
        Date of Easter Sunday in the given year.

    Raises:
        InvalidArgumentError: If year is not a positive integer.
    """
    if year is None or isinstance(year, bool) or not isinstance(year, int):
        raise InvalidArgumentError(f"Year must be an integer, got {year!r}")
    if year <= 0:
        raise InvalidArgumentError(f"Year must be positive, got {year}")

    golden_number = year % 19  # position in the 19-year Metonic cycle
    century, year_of_century = divmod(year, 100)
    century_div4, century_rem4 = divmod(century, 4)

    solar_correction = (century + 8) // 25
    lunar_correction = (century - solar_correction + 1) // 3

    # Days from March 21 to the paschal full moon
    paschal_full_moon = (
        19 * golden_number + century - century_div4 - lunar_correction + 15
    ) % 30

    year_div4, year_rem4 = divmod(year_of_century, 4)

    # Days from the paschal full moon to the following Sunday
    weekday_offset = (
        32 + 2 * century_rem4 + 2 * year_div4 - paschal_full_moon - year_rem4
    ) % 7

    late_correction = (golden_number + 11 * paschal_full_moon + 22 * weekday_offset) // 451

    month, day = divmod(paschal_full_moon + weekday_offset - 7 * late_correction + 114, 31)
    return date(year, month, day + 1)
