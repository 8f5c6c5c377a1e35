"""
DateTime utilities for consistent timezone handling.

Domain code reads the clock only through ``utc_now`` so tests can patch it.
"""
from datetime import date, datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get the current UTC time with timezone awareness.

    Returns:
        datetime: Current UTC time with timezone info
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Attach UTC to naive datetimes and convert aware ones to UTC.

    Args:
        dt: Datetime to normalize, or None

    Returns:
        Timezone-aware UTC datetime, or None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def years_between(earlier: date, later: date) -> int:
    """
    Count whole years between two dates (birthday-aware).

    Args:
        earlier: Start date, e.g. a date of birth
        later: End date, e.g. today

    Returns:
        Number of completed years
    """
    years = later.year - earlier.year
    if (later.month, later.day) < (earlier.month, earlier.day):
        years -= 1
    return years
