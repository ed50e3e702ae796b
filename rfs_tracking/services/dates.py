"""Calendar helpers for the top-scenarios aggregation.

All dates are in the server's local calendar; no time zone is configurable.
"""

from datetime import date, datetime
from typing import Any


def format_ymd(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def today_string() -> str:
    """Today as YYYY-MM-DD in the local calendar."""
    return format_ymd(date.today())


def normalize_date(value: Any) -> str:
    """Reduce a sheet date cell to a YYYY-MM-DD key.

    Native dates are formatted from their local year/month/day (aware
    datetimes are shifted to the local zone first). Anything else is
    stringified, trimmed and cut to its first 10 characters.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return format_ymd(value)
    if isinstance(value, date):
        return format_ymd(value)
    return str(value).strip()[:10]
