"""
UTC helpers for date variables.

Date variables are resolved to timezone-aware UTC datetimes and stored as
epoch milliseconds; these helpers convert between the two forms.
"""

from datetime import UTC, datetime


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Normalize a datetime to UTC.

    - None stays None
    - Naive values are taken as UTC
    - Aware values are converted to UTC

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_timestamp_ms(dt: datetime) -> int:
    """Milliseconds since epoch (naive means UTC); storage form of date variables."""
    return int(ensure_utc(dt).timestamp() * 1000)


def from_timestamp_ms_utc(timestamp_ms: int) -> datetime:
    """UTC-aware datetime from a stored millisecond timestamp."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC)
