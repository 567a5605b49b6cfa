"""
Reusable fakes and in-memory implementations for tests.
"""

from .fake_config_provider import InMemoryConfigProvider
from .fake_runtime import (
    FixedClock,
    InMemoryLogger,
    SequentialIdGenerator,
)

__all__ = [
    "InMemoryConfigProvider",
    "FixedClock",
    "SequentialIdGenerator",
    "InMemoryLogger",
]
