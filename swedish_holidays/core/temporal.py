"""
Resolution of temporal values to a calendar date in the reference timezone.
"""

import time
from datetime import date, datetime
from typing import Any
from zoneinfo import ZoneInfo

from swedish_holidays.exceptions import InvalidArgumentError, TemporalResolutionError

REFERENCE_TIMEZONE = ZoneInfo("Europe/Stockholm")


def today(tz: ZoneInfo = REFERENCE_TIMEZONE) -> date:
    """Today's date in the given timezone."""
    return datetime.now(tz).date()


def to_reference_date(value: Any, tz: ZoneInfo = REFERENCE_TIMEZONE) -> date:
    """
    Resolve a point in time or calendar date to a date in the reference zone.

    Supported inputs:
    - timezone-aware datetime: converted to tz, then truncated to a date
    - naive datetime: assumed to already be local time in tz
    - date: returned unchanged
    - int/float: POSIX timestamp in seconds
    - time.struct_time: its year, month and day
    - str: ISO 8601 date or datetime
    - objects with to_pydatetime() (e.g. pandas Timestamp)

    Args:
        value: The value to resolve.
        tz: Reference timezone.

    Returns:
        The calendar date.

    Raises:
        InvalidArgumentError: If value is None.
        TemporalResolutionError: If value cannot be resolved to a date.
    """
    if value is None:
        raise InvalidArgumentError("Date must not be None")

    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
            return value.date()
        return value.astimezone(tz).date()

    if isinstance(value, date):
        return value

    if isinstance(value, time.struct_time):
        return date(value.tm_year, value.tm_mon, value.tm_mday)

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, tz).date()
        except (OverflowError, OSError, ValueError) as e:
            raise TemporalResolutionError(f"Invalid timestamp {value!r}: {e}") from e

    if isinstance(value, str):
        return _parse_iso(value.strip(), tz)

    to_pydatetime = getattr(value, "to_pydatetime", None)
    if callable(to_pydatetime):
        return to_reference_date(to_pydatetime(), tz)

    raise TemporalResolutionError(
        f"Cannot resolve value of type {type(value).__name__} to a calendar date"
    )


def _parse_iso(text: str, tz: ZoneInfo) -> date:
    """Parse an ISO 8601 date or datetime string."""
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    # Python < 3.11 does not accept a trailing 'Z'
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return to_reference_date(datetime.fromisoformat(text), tz)
    except ValueError as e:
        raise TemporalResolutionError(f"Invalid date format: {text!r}") from e
