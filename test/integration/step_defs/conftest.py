"""Shared fixtures and context for BDD step definitions."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generator

import httpx
import pytest

from test.fixtures import ALICE, BOB, TrackerHarness, build_harness

USERS = {"alice": ALICE, "bob": BOB}


@dataclass
class TrackerContext:
    """Holds mutable state shared across BDD steps."""

    harness: TrackerHarness
    response: httpx.Response | None = None
    tracker_id: str | None = None
    extras: dict[str, Any] = field(default_factory=dict)

    def headers_for(self, user: str) -> dict[str, str]:
        return USERS[user]


@pytest.fixture()
def ctx() -> Generator[TrackerContext, None, None]:
    harness = build_harness()
    with harness.client:
        yield TrackerContext(harness=harness)
