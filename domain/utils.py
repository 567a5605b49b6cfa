from __future__ import annotations

from datetime import datetime, timezone


def split_csv(raw: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def format_timestamp(dt: datetime) -> str:
    """Render ``dt`` as UTC ISO-8601 with milliseconds, e.g. ``2025-01-01T09:30:00.000Z``."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
