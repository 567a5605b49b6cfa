from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from typing import Any, Protocol, Sequence, runtime_checkable

from domain.models import AppConfig, AuthenticatedUser, TrackedJob


@runtime_checkable
class TrackedJobRepositoryPort(Protocol):
    """Store and query tracked-job records by tracker id and by owner."""

    @abstractmethod
    def add(self, record: TrackedJob) -> None:
        ...

    @abstractmethod
    def update(self, record: TrackedJob) -> None:
        ...

    @abstractmethod
    def get(self, tracker_id: str) -> TrackedJob | None:
        ...

    @abstractmethod
    def delete(self, tracker_id: str) -> bool:
        ...

    @abstractmethod
    def list_by_owner(self, user_id: str) -> Sequence[TrackedJob]:
        ...


@runtime_checkable
class TokenVerifierPort(Protocol):
    """
    Resolves a bearer token to the calling user.

    Implementations raise ``AuthenticationError`` for tokens they reject.
    """

    def verify(self, token: str) -> AuthenticatedUser:
        ...


@runtime_checkable
class ConfigProviderPort(Protocol):
    """Read-only access to validated application configuration."""

    def get_config(self) -> AppConfig:
        ...

    def validate(self) -> list[str]:
        ...


@runtime_checkable
class ClockPort(Protocol):
    """Time source for deterministic and easily testable code."""

    def now(self) -> datetime:
        ...


@runtime_checkable
class IdGeneratorPort(Protocol):
    """Generation of unique tracker identifiers."""

    def new_tracker_id(self) -> str:
        ...


@runtime_checkable
class LoggerPort(Protocol):
    """Structured, testable logging abstraction."""

    def info(self, message: str, **fields: Any) -> None:
        ...

    def warning(self, message: str, **fields: Any) -> None:
        ...

    def error(self, message: str, **fields: Any) -> None:
        ...


__all__ = [
    "TrackedJobRepositoryPort",
    "TokenVerifierPort",
    "ConfigProviderPort",
    "ClockPort",
    "IdGeneratorPort",
    "LoggerPort",
]
