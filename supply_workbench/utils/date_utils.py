# supply_workbench/utils/date_utils.py
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

DateLike = Union[date, datetime, str]

def convert_to_date(value: Optional[DateLike]) -> Optional[date]:
    """Convert a date, datetime or ISO-8601 string to a date.

    Args:
        value: Value to convert. Strings may carry a time part
               ('2025-03-01T00:00:00Z'), which is dropped.

    Returns:
        Date object, or None if value is None

    Raises:
        ValueError if a string cannot be parsed
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            raise ValueError(f"Invalid date value: {value!r}")

    raise ValueError(f"Unsupported date type: {type(value).__name__}")

def to_iso_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.isoformat()

def to_month_key(value: DateLike) -> str:
    """Format a date as a YYYY-MM month key."""
    return convert_to_date(value).strftime('%Y-%m')

def add_days(start: date, days: int) -> date:
    """Return the calendar date `days` after start."""
    return start + timedelta(days=days)

def get_horizon_dates(start: date, horizon_days: int) -> List[date]:
    """Get every calendar date from start through start + horizon_days inclusive.

    Args:
        start: Day 0 of the horizon
        horizon_days: Number of days after start

    Returns:
        List of horizon_days + 1 dates
    """
    return [add_days(start, day) for day in range(horizon_days + 1)]

def days_between(first: date, second: date) -> int:
    """Absolute number of days between two dates."""
    return abs((first - second).days)
