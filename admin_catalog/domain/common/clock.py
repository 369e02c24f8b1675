"""Wall-clock source for entity timestamps."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time in UTC, at microsecond precision."""
    return datetime.now(UTC)
