from __future__ import annotations

import threading
from typing import Sequence

from domain.models import TrackedJob


class InMemoryTrackedJobRepository:
    """
    Process-local implementation of ``TrackedJobRepositoryPort``.

    Records live in a dict keyed by tracker id, in insertion order, and
    are lost when the process exits.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: dict[str, TrackedJob] = {}

    def add(self, record: TrackedJob) -> None:
        with self._lock:
            if record.id in self._records:
                raise ValueError(f"Tracker id already exists: {record.id}")
            self._records[record.id] = record

    def update(self, record: TrackedJob) -> None:
        with self._lock:
            if record.id not in self._records:
                raise KeyError(record.id)
            self._records[record.id] = record

    def get(self, tracker_id: str) -> TrackedJob | None:
        with self._lock:
            return self._records.get(tracker_id)

    def delete(self, tracker_id: str) -> bool:
        with self._lock:
            return self._records.pop(tracker_id, None) is not None

    def list_by_owner(self, user_id: str) -> Sequence[TrackedJob]:
        with self._lock:
            return [r for r in self._records.values() if r.user_id == user_id]

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
