from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from domain.models import TrackedJob, TrackedJobStatus
from domain.ports import TrackedJobRepositoryPort
from infra.persistence import InMemoryTrackedJobRepository

_TS = datetime(2025, 6, 1, tzinfo=timezone.utc)


@pytest.fixture()
def repo() -> InMemoryTrackedJobRepository:
    return InMemoryTrackedJobRepository()


def _make_record(**overrides: object) -> TrackedJob:
    defaults: dict = dict(
        id="trk-1",
        user_id="alice",
        job_id="ext-1",
        title="Software Engineer",
        company="Acme Inc",
        created_at=_TS,
        updated_at=_TS,
    )
    defaults.update(overrides)
    return TrackedJob(**defaults)


# -- protocol conformance --------------------------------------------------

def test_conforms_to_tracked_job_repository_port(repo: InMemoryTrackedJobRepository) -> None:
    assert isinstance(repo, TrackedJobRepositoryPort)


# -- add / get --------------------------------------------------------------

def test_empty_initially(repo: InMemoryTrackedJobRepository) -> None:
    assert repo.list_by_owner("alice") == []
    assert len(repo) == 0


def test_add_and_get(repo: InMemoryTrackedJobRepository) -> None:
    record = _make_record()
    repo.add(record)
    assert repo.get("trk-1") == record


def test_get_returns_none_for_missing(repo: InMemoryTrackedJobRepository) -> None:
    assert repo.get("nonexistent") is None


def test_add_duplicate_id_raises(repo: InMemoryTrackedJobRepository) -> None:
    repo.add(_make_record())
    with pytest.raises(ValueError):
        repo.add(_make_record(title="Other"))
    assert repo.get("trk-1").title == "Software Engineer"


# -- update / delete --------------------------------------------------------

def test_update_replaces_record(repo: InMemoryTrackedJobRepository) -> None:
    record = _make_record()
    repo.add(record)
    repo.update(replace(record, status=TrackedJobStatus.OFFERED))
    loaded = repo.get("trk-1")
    assert loaded is not None
    assert loaded.status is TrackedJobStatus.OFFERED


def test_update_missing_raises(repo: InMemoryTrackedJobRepository) -> None:
    with pytest.raises(KeyError):
        repo.update(_make_record())


def test_delete(repo: InMemoryTrackedJobRepository) -> None:
    repo.add(_make_record())
    assert repo.delete("trk-1") is True
    assert repo.get("trk-1") is None
    assert repo.delete("trk-1") is False


# -- listing ----------------------------------------------------------------

def test_list_by_owner_filters_and_keeps_insertion_order(
    repo: InMemoryTrackedJobRepository,
) -> None:
    repo.add(_make_record(id="trk-1"))
    repo.add(_make_record(id="trk-2", user_id="bob"))
    repo.add(_make_record(id="trk-3"))

    assert [r.id for r in repo.list_by_owner("alice")] == ["trk-1", "trk-3"]
    assert [r.id for r in repo.list_by_owner("bob")] == ["trk-2"]
    assert repo.list_by_owner("carol") == []
    assert len(repo) == 3


def test_listing_returns_a_snapshot(repo: InMemoryTrackedJobRepository) -> None:
    repo.add(_make_record())
    snapshot = repo.list_by_owner("alice")
    repo.delete("trk-1")
    assert len(snapshot) == 1
