"""FastAPI dependencies."""

from fastapi import HTTPException, Request

from diy_tracker.domain.models import Project
from diy_tracker.store.project_store import ProjectStore


def get_store(request: Request) -> ProjectStore:
    """Return the ProjectStore created during app startup."""
    return request.app.state.store


def require_project(store: ProjectStore, project_id: str) -> Project:
    """Fetch a project or raise 404.

    The store treats unknown ids as no-ops; the HTTP layer reports them.
    """
    project = store.get_project(project_id)
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return project
