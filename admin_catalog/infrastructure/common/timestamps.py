"""Helpers for timestamps read back from the database."""

from datetime import UTC, datetime


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive values; SQLite and MySQL drop the offset."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def as_utc_or_none(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    return as_utc(value)
