"""
Centralized date/time utilities
All date/time operations should use functions from this module
"""

from datetime import date, datetime, time, timezone, timedelta
from typing import Any, Optional
from tasktracker.config.settings import settings

# Singleton timezone object
USER_TIMEZONE = timezone(timedelta(hours=settings.USER_TIMEZONE_OFFSET))


def get_current_datetime() -> datetime:
    """
    Get current datetime in the user timezone

    Returns:
        Current timezone-aware datetime
    """
    return datetime.now(USER_TIMEZONE)


def start_of_day(moment: datetime) -> datetime:
    """Midnight at the beginning of the calendar day of `moment`"""
    return datetime.combine(moment.date(), time.min, tzinfo=moment.tzinfo)


def end_of_day(moment: datetime) -> datetime:
    """Last representable instant of the calendar day of `moment`"""
    return datetime.combine(moment.date(), time.max, tzinfo=moment.tzinfo)


def ensure_aware(moment: datetime) -> datetime:
    """Attach the user timezone to naive datetimes"""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=USER_TIMEZONE)
    return moment


def parse_datetime(value: Any) -> Optional[datetime]:
    """
    Parse a due date value into a timezone-aware datetime

    Accepts datetime/date objects and ISO 8601 strings
    (e.g. "2024-11-05", "2024-11-05T10:00:00Z", "2024-11-05T10:00:00+03:00").
    Naive values are interpreted in the user timezone.

    Args:
        value: Raw value

    Returns:
        Parsed datetime, or None if the value is empty

    Raises:
        ValueError: If the value cannot be parsed
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        return ensure_aware(value)

    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=USER_TIMEZONE)

    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")

    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    return ensure_aware(parsed)
