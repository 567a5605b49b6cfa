from __future__ import annotations

from typing import Generator

import pytest

from test.fixtures import TrackerHarness, build_harness


@pytest.fixture()
def harness() -> Generator[TrackerHarness, None, None]:
    h = build_harness()
    with h.client:
        yield h
