"""Infrastructure adapters – concrete implementations of domain ports."""

from .auth import StaticTokenVerifier
from .config import FileSystemConfigProvider
from .persistence import InMemoryTrackedJobRepository
from .runtime import StructuredLogger, SystemClock, UuidIdGenerator

__all__ = [
    "StaticTokenVerifier",
    "FileSystemConfigProvider",
    "InMemoryTrackedJobRepository",
    "SystemClock",
    "UuidIdGenerator",
    "StructuredLogger",
]
