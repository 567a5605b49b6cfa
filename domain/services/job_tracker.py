from __future__ import annotations

import threading
from collections import Counter
from contextlib import contextmanager
from dataclasses import replace
from typing import Iterator, Sequence

from domain.errors import AuthorizationError, ConflictError, NotFoundError, ValidationError
from domain.models import NewTrackedJob, TrackedJob, TrackedJobStatus, TrackerNote, TrackerStats
from domain.ports import ClockPort, IdGeneratorPort, LoggerPort, TrackedJobRepositoryPort


class _UserLocks:
    """
    Mutex per user id, created on demand.

    An entry is dropped as soon as no caller holds or waits on it, so the
    table only ever contains users with calls in flight.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, list] = {}  # user_id -> [lock, holders]

    @contextmanager
    def hold(self, user_id: str) -> Iterator[None]:
        with self._guard:
            entry = self._locks.get(user_id)
            if entry is None:
                entry = self._locks[user_id] = [threading.Lock(), 0]
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[user_id]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


class JobTrackerService:
    """
    Owns the tracked-job collection of every user.

    All validation happens before the repository is touched, so a failed
    call never leaves a partial mutation behind.
    """

    def __init__(
        self,
        *,
        repo: TrackedJobRepositoryPort,
        clock: ClockPort,
        id_generator: IdGeneratorPort,
        logger: LoggerPort,
    ) -> None:
        self._repo = repo
        self._clock = clock
        self._id_generator = id_generator
        self._logger = logger
        self._user_locks = _UserLocks()

    def list_jobs(self, user_id: str) -> Sequence[TrackedJob]:
        """Return the caller's records, newest first."""
        jobs = list(self._repo.list_by_owner(user_id))
        jobs.sort(key=lambda job: job.created_at, reverse=True)
        return jobs

    def get_stats(self, user_id: str) -> TrackerStats:
        counts = Counter(job.status for job in self._repo.list_by_owner(user_id))
        return TrackerStats(
            total=sum(counts.values()),
            saved=counts[TrackedJobStatus.SAVED],
            applied=counts[TrackedJobStatus.APPLIED],
            interviewing=counts[TrackedJobStatus.INTERVIEWING],
            offered=counts[TrackedJobStatus.OFFERED],
            rejected=counts[TrackedJobStatus.REJECTED],
        )

    def get_job(self, tracker_id: str, user_id: str) -> TrackedJob:
        return self._get_owned(tracker_id, user_id)

    def track_job(self, user_id: str, fields: NewTrackedJob) -> TrackedJob:
        if not fields.title or not fields.company:
            raise ValidationError("Job title and company are required")
        status = self._parse_status(fields.status) if fields.status else TrackedJobStatus.SAVED

        with self._user_locks.hold(user_id):
            if fields.job_id:
                for job in self._repo.list_by_owner(user_id):
                    if job.job_id == fields.job_id:
                        raise ConflictError("Job already tracked")

            tracker_id = self._id_generator.new_tracker_id()
            now = self._clock.now()
            record = TrackedJob(
                id=tracker_id,
                user_id=user_id,
                job_id=fields.job_id or tracker_id,
                title=fields.title,
                company=fields.company,
                location=fields.location or "Remote",
                job_type=fields.job_type or "Full-time",
                salary=fields.salary or None,
                apply_link=fields.apply_link or None,
                description=fields.description or None,
                status=status,
                notes=(),
                created_at=now,
                updated_at=now,
            )
            self._repo.add(record)

        self._logger.info(
            "Job tracked",
            tracker_id=record.id,
            user_id=user_id,
            job_id=record.job_id,
            status=record.status.value,
        )
        return record

    def update_job(
        self,
        tracker_id: str,
        user_id: str,
        *,
        status: str | None = None,
        notes: str | None = None,
    ) -> TrackedJob:
        """
        Overwrite the status and/or append a note.

        Empty ``status`` or ``notes`` values are ignored, but ``updated_at``
        is refreshed on every successful call.
        """
        with self._user_locks.hold(user_id):
            job = self._get_owned(tracker_id, user_id)
            new_status = self._parse_status(status) if status else job.status

            now = self._clock.now()
            new_notes = tuple(job.notes)
            if notes:
                new_notes += (TrackerNote(text=notes, created_at=now),)

            updated = replace(job, status=new_status, notes=new_notes, updated_at=now)
            try:
                self._repo.update(updated)
            except KeyError:
                raise NotFoundError("Tracked job not found") from None
        self._logger.info(
            "Job updated",
            tracker_id=tracker_id,
            user_id=user_id,
            status=updated.status.value,
            note_added=bool(notes),
        )
        return updated

    def remove_job(self, tracker_id: str, user_id: str) -> None:
        with self._user_locks.hold(user_id):
            self._get_owned(tracker_id, user_id)
            if not self._repo.delete(tracker_id):
                raise NotFoundError("Tracked job not found")
        self._logger.info("Job removed", tracker_id=tracker_id, user_id=user_id)

    # -- helpers ------------------------------------------------------------

    def _get_owned(self, tracker_id: str, user_id: str) -> TrackedJob:
        job = self._repo.get(tracker_id)
        if job is None:
            raise NotFoundError("Tracked job not found")
        if job.user_id != user_id:
            self._logger.warning(
                "Access to tracked job denied",
                tracker_id=tracker_id,
                user_id=user_id,
            )
            raise AuthorizationError("Access denied")
        return job

    @staticmethod
    def _parse_status(raw: str) -> TrackedJobStatus:
        status = TrackedJobStatus.parse(raw)
        if status is None:
            raise ValidationError("Invalid status")
        return status
