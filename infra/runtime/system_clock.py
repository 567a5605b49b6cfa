from __future__ import annotations

from datetime import datetime, timezone


class SystemClock:
    """UTC wall clock truncated to the millisecond precision records are rendered with."""

    def now(self) -> datetime:
        current = datetime.now(timezone.utc)
        return current.replace(microsecond=current.microsecond - current.microsecond % 1000)
