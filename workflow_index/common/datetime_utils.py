"""UTC datetime utilities for index timestamps.

Usage:
    from workflow_index.common.datetime_utils import format_iso8601_utc, utcnow

    last_updated = format_iso8601_utc(utcnow())  # '2025-01-15T10:30:00.123Z'
"""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Use this instead of datetime.now() or datetime.utcnow().

    Returns:
        Current time in UTC with timezone information.
    """
    return datetime.now(UTC)


def validate_aware_datetime(dt: datetime) -> datetime:
    """Validate that datetime is timezone-aware.

    Args:
        dt: Datetime to validate

    Returns:
        The same datetime if valid

    Raises:
        ValueError: If datetime is naive
    """
    if dt.tzinfo is None:
        raise ValueError(
            f"Naive datetime not allowed: {dt}. "
            "All datetimes must be timezone-aware (use datetime.now(UTC) or utcnow())."
        )
    return dt


def format_iso8601_utc(dt: datetime) -> str:
    """Format datetime as ISO 8601 with millisecond precision and 'Z' suffix.

    Args:
        dt: Timezone-aware datetime

    Returns:
        ISO 8601 string (e.g., '2025-01-15T10:30:00.123Z')

    Raises:
        ValueError: If datetime is naive
    """
    validate_aware_datetime(dt)
    utc_dt = dt.astimezone(UTC)
    return utc_dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
