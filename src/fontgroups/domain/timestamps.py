"""Timestamp helpers for the persisted JSON format.

Timestamps are stored as ISO-8601 UTC strings with millisecond precision
and a trailing ``Z`` (e.g. ``2024-05-01T12:00:00.000Z``), so a document
read and written again serializes to the same text.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as an aware UTC datetime truncated to milliseconds."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def format_timestamp(value: datetime) -> str:
    """Serialize a datetime to the stored string form.

    Naive datetimes are assumed to already be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Parse a stored timestamp string into an aware UTC datetime.

    Raises:
        ValueError: If the string is not ISO-8601
        TypeError: If the value is not a string
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected timestamp string, got {type(value).__name__}")
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
