"""Persistence adapters for domain repository ports."""

from .in_memory_tracked_job_repository import InMemoryTrackedJobRepository

__all__ = [
    "InMemoryTrackedJobRepository",
]
