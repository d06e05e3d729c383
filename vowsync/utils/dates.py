"""
Date parsing helpers shared by the classifiers and the sort/filter engines
"""

from datetime import date, datetime, timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo

from vowsync.core.config import DisplayConfig, DEFAULT_DISPLAY_CONFIG
from vowsync.core.exceptions import InvalidDateFormat


def parse_date(value: Any, field: Optional[str] = None) -> date:
    """Parse an ISO date or datetime value down to a calendar date.

    Raises InvalidDateFormat for anything that is not a date, a datetime or
    an ISO-8601 string.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateFormat(value, field)

    text = value.strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        raise InvalidDateFormat(value, field)


def _naive_utc(value: datetime) -> datetime:
    """Offset-aware values are shifted to UTC; naive ones are taken as UTC already"""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def try_parse_datetime(value: Any) -> Optional[datetime]:
    """Lenient variant used for sorting and range filters; returns None when unparseable"""
    if isinstance(value, datetime):
        return _naive_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    return _naive_utc(parsed)


def today_for(config: DisplayConfig = DEFAULT_DISPLAY_CONFIG) -> date:
    """Current calendar date in the configured timezone"""
    return datetime.now(ZoneInfo(config.timezone)).date()


def days_between(start: date, end: date) -> int:
    """Whole calendar days from start to end (negative when end is before start)"""
    return (end - start).days
