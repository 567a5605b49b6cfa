"""Shared wiring for tests that drive the tracker over HTTP."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from fastapi.testclient import TestClient

from app import create_app
from domain.services import JobTrackerService
from infra.auth import StaticTokenVerifier
from infra.persistence import InMemoryTrackedJobRepository
from test.mocks import FixedClock, InMemoryConfigProvider, InMemoryLogger, SequentialIdGenerator

ALICE = {"Authorization": "Bearer token-alice"}
BOB = {"Authorization": "Bearer token-bob"}
START = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@dataclass
class TrackerHarness:
    client: TestClient
    repo: InMemoryTrackedJobRepository
    clock: FixedClock
    logger: InMemoryLogger


def build_harness() -> TrackerHarness:
    """Wire the tracker API to in-memory adapters and a controllable clock."""
    config = InMemoryConfigProvider().get_config()
    repo = InMemoryTrackedJobRepository()
    clock = FixedClock(START)
    logger = InMemoryLogger()
    service = JobTrackerService(
        repo=repo,
        clock=clock,
        id_generator=SequentialIdGenerator(),
        logger=logger,
    )
    app = create_app(
        service=service,
        token_verifier=StaticTokenVerifier(config.api_tokens),
        logger=logger,
    )
    return TrackerHarness(client=TestClient(app), repo=repo, clock=clock, logger=logger)
