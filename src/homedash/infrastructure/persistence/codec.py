"""Conversions between domain values and their JSON representation."""

from __future__ import annotations

from datetime import datetime, timezone


def datetime_to_raw(value: datetime | None) -> str | None:
    return None if value is None else value.isoformat()


def datetime_from_raw(value: str | None) -> datetime | None:
    """Parse an ISO-8601 string; naive values are taken to be UTC."""
    if value is None:
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
