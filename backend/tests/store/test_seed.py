"""Tests for the demo project seed."""
from decimal import Decimal

import pytest

from diy_tracker.domain.models import ProjectFields
from diy_tracker.domain.summaries import material_totals
from diy_tracker.store.persistence import InMemorySnapshotStore
from diy_tracker.store.project_store import ProjectStore
from diy_tracker.store.seed import seed_demo_projects

pytestmark = pytest.mark.unit


def test_seeds_empty_store(store):
    assert seed_demo_projects(store) == 2

    kitchen, bench = store.projects
    assert kitchen.title == "Kitchen Cabinet Makeover"
    assert len(kitchen.materials) == 3
    assert len(kitchen.tutorial_steps) == 4
    assert kitchen.progress == 50
    assert bench.progress == 100


def test_seeded_materials_total(store):
    seed_demo_projects(store)

    kitchen = store.projects[0]
    assert material_totals(kitchen.materials).total_cost == Decimal("225.98")


def test_skips_non_empty_store(store):
    store.create_project(ProjectFields(title="Mine"))

    assert seed_demo_projects(store) == 0
    assert [p.title for p in store.projects] == ["Mine"]


def test_idempotent(store):
    seed_demo_projects(store)
    seed_demo_projects(store)

    assert len(store.projects) == 2


def test_skips_after_failed_load(clock):
    store = ProjectStore(InMemorySnapshotStore({"projects": "garbage"}), clock=clock)
    store.load()

    assert seed_demo_projects(store) == 0
    assert store.projects == []
