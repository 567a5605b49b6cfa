from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Sequence


class TrackedJobStatus(str, Enum):
    """Lifecycle states a user can move a tracked job through."""

    SAVED = "saved"
    APPLIED = "applied"
    INTERVIEWING = "interviewing"
    OFFERED = "offered"
    REJECTED = "rejected"

    @classmethod
    def parse(cls, value: str) -> TrackedJobStatus | None:
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class TrackerNote:
    """A free-text note attached to a tracked job."""

    text: str
    created_at: datetime


@dataclass(frozen=True)
class TrackedJob:
    """
    A job listing a user is tracking through the application process.

    ``id`` is the tracker identifier generated by the service; ``job_id``
    references the underlying listing and is unique per owning user.
    """

    id: str
    user_id: str
    job_id: str
    title: str
    company: str
    created_at: datetime
    updated_at: datetime
    location: str = "Remote"
    job_type: str = "Full-time"
    salary: str | None = None
    apply_link: str | None = None
    description: str | None = None
    status: TrackedJobStatus = TrackedJobStatus.SAVED
    notes: Sequence[TrackerNote] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Keep the notes sequence immutable alongside the record itself.
        object.__setattr__(self, "notes", tuple(self.notes))


@dataclass(frozen=True)
class NewTrackedJob:
    """Caller-supplied fields for a job that is about to be tracked."""

    title: str | None = None
    company: str | None = None
    job_id: str | None = None
    location: str | None = None
    job_type: str | None = None
    salary: str | None = None
    apply_link: str | None = None
    description: str | None = None
    status: str | None = None


@dataclass(frozen=True)
class TrackerStats:
    """Per-status counts over one user's tracked jobs."""

    total: int = 0
    saved: int = 0
    applied: int = 0
    interviewing: int = 0
    offered: int = 0
    rejected: int = 0

    def as_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "saved": self.saved,
            "applied": self.applied,
            "interviewing": self.interviewing,
            "offered": self.offered,
            "rejected": self.rejected,
        }


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity resolved from a verified bearer token."""

    uid: str


@dataclass(frozen=True)
class AppConfig:
    """Application-level configuration loaded from config.json."""

    api_tokens: Mapping[str, str]
    host: str = "127.0.0.1"
    port: int = 8000
    allowed_origins: Sequence[str] = field(default_factory=tuple)
    debug_mode: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "api_tokens", MappingProxyType(dict(self.api_tokens)))
        object.__setattr__(self, "allowed_origins", tuple(self.allowed_origins))


__all__ = [
    "AppConfig",
    "AuthenticatedUser",
    "NewTrackedJob",
    "TrackedJob",
    "TrackedJobStatus",
    "TrackerNote",
    "TrackerStats",
]
