"""Current-time provider used by services that need "now"."""

from datetime import datetime, UTC
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def to_naive_utc(value: datetime) -> datetime:
    """Normalize a datetime to naive UTC, the form timestamps are stored in.

    Naive values are assumed to already be UTC and are returned unchanged.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)
