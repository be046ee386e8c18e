"""Utility functions for meeting search"""

from datetime import date, datetime, time, timezone
from typing import Union


def create_snippet(text: str, max_length: int) -> str:
    """
    Truncate text to a display snippet

    Args:
        text: Source text (None treated as empty)
        max_length: Maximum snippet length including the "..." marker

    Returns:
        Text unchanged if it fits, otherwise cut to max_length with trailing "..."

    Examples:
        >>> create_snippet("Quarterly planning", 150)
        'Quarterly planning'

        >>> create_snippet("abcdefghij", 8)
        'abcde...'
    """
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max(max_length - 3, 0)] + "..."


def to_utc_datetime(value: Union[datetime, date]) -> datetime:
    """
    Normalize a date or datetime to an aware UTC datetime for comparisons

    Naive datetimes are assumed to already be UTC.
    Plain dates map to midnight UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime.combine(value, time.min, tzinfo=timezone.utc)
