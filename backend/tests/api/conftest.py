"""API-specific test fixtures."""

import pytest
from fastapi.testclient import TestClient

from diy_tracker.core.config import Settings
from diy_tracker.main import create_app
from diy_tracker.store.ids import SequentialIds
from diy_tracker.store.project_store import ProjectStore


@pytest.fixture
def api_store(backend, clock):
    """Store injected into the app; tests can inspect it directly."""
    return ProjectStore(backend, id_generator=SequentialIds(), clock=clock)


@pytest.fixture
def api_client(api_store):
    """FastAPI test client backed by an in-memory store.

    Entering the client runs the lifespan, which loads the store.
    """
    app = create_app(settings=Settings(store_backend="memory"), store=api_store)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def created_project(api_client):
    """Create a project through the API and return its JSON body."""
    response = api_client.post(
        "/api/projects/",
        json={
            "title": "Kitchen Cabinet Makeover",
            "description": "Paint and new hardware",
            "category": "Home Improvement",
            "status": "in-progress",
            "difficulty": "intermediate",
            "estimatedTime": 16,
            "budget": 300,
        },
    )
    assert response.status_code == 201
    return response.json()
