"""
Timezone-aware datetime utilities for Media Ranker.

All functions return timezone-aware datetime objects in UTC, replacing the
deprecated datetime.utcnow().
"""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get the current UTC time as a timezone-aware datetime object.

    Returns:
        datetime: Current UTC time with timezone information

    Example:
        >>> now = utc_now()
        >>> print(now.tzinfo)  # UTC
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes read back from SQLite."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_timestamp(dt: Optional[datetime], fmt: str = '%b %d, %Y') -> str:
    """Format a stored timestamp for templates, empty string for None."""
    if dt is None:
        return ''
    return ensure_utc(dt).strftime(fmt)
