"""Shared test fixtures for all test groups."""

from datetime import UTC, datetime, timedelta

import pytest

from diy_tracker.domain.models import ProjectFields
from diy_tracker.store.ids import SequentialIds
from diy_tracker.store.persistence import InMemorySnapshotStore
from diy_tracker.store.project_store import ProjectStore


class SteppingClock:
    """Returns a time one second later on every call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 15, 10, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(seconds=1)
        return now


@pytest.fixture
def clock():
    return SteppingClock()


@pytest.fixture
def backend():
    """Empty in-memory snapshot backend."""
    return InMemorySnapshotStore()


@pytest.fixture
def store(backend, clock):
    """Loaded ProjectStore with deterministic ids and a stepping clock."""
    project_store = ProjectStore(backend, id_generator=SequentialIds(), clock=clock)
    project_store.load()
    return project_store


@pytest.fixture
def project(store):
    """A freshly created project with no materials or steps."""
    return store.create_project(
        ProjectFields(
            title="Garden Storage Bench",
            description="Weatherproof bench for garden tools",
            category="Garden",
            estimated_time=8,
        )
    )
