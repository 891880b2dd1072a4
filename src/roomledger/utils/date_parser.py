"""Date parsing utilities."""

import re
from datetime import date, datetime, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

_MONTH_RE = re.compile(r"^(\d{4})-(\d{1,2})$")


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow", "this month",
      "last month", "next month"

    Args:
        date_str: Date string in various formats
        today: Reference day for relative dates (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if today is None:
        today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "next month": (today + relativedelta(months=1)).replace(day=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # Try parsing as absolute date
    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_datetime(value: str) -> datetime:
    """Parse a timestamp string (e.g. "2025-07-03T14:30") into a datetime.

    Raises:
        ValueError: If the string cannot be parsed
    """
    try:
        return date_parser.isoparse(value.strip())
    except (ValueError, OverflowError):
        pass
    try:
        return date_parser.parse(value.strip())
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse timestamp '{value}': {e}")


def parse_month(month_str: str, end: bool = False) -> date:
    """Parse a billing month.

    Accepts "YYYY-MM" (resolved to the first day of the month, or the last
    day when ``end`` is True) or any full date accepted by parse_date, which
    is returned as-is.

    Raises:
        ValueError: If the string cannot be parsed
    """
    match = _MONTH_RE.match(month_str.strip())
    if match is None:
        return parse_date(month_str)

    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"Could not parse month '{month_str}': month must be 1-12")

    first = date(year, month, 1)
    if end:
        return first + relativedelta(months=1) - timedelta(days=1)
    return first


def month_bounds(reference: date | datetime) -> tuple[datetime, datetime]:
    """Return the half-open timestamp range covering a calendar month.

    The range is [first day 00:00, first day of next month 00:00), which
    includes every instant of the month's last day.

    Args:
        reference: Any date or datetime inside the month

    Returns:
        Tuple of (start, end) naive datetimes
    """
    if isinstance(reference, datetime):
        reference = reference.date()
    start = datetime(reference.year, reference.month, 1)
    end = start + relativedelta(months=1)
    return (start, end)
