"""Project API routes -- the list view and the create/edit dialog.

Handlers are ``async def`` so every store call runs on the event loop thread,
one at a time.
"""

from typing import Literal

from fastapi import APIRouter, Depends, Response

from diy_tracker.api.deps import get_store, require_project
from diy_tracker.domain.models import Difficulty, Project, ProjectStatus
from diy_tracker.domain.summaries import (
    PRESET_CATEGORIES,
    categories_in_use,
    filter_projects,
    material_totals,
    project_stats,
    step_totals,
)
from diy_tracker.schemas.projects import (
    MaterialSummary,
    ProjectCreateRequest,
    ProjectDetailResponse,
    ProjectStatsResponse,
    ProjectUpdateRequest,
    StepSummary,
)
from diy_tracker.store.project_store import ProjectStore

router = APIRouter()


def to_detail(project: Project) -> ProjectDetailResponse:
    return ProjectDetailResponse(
        **dict(project),
        material_summary=MaterialSummary.from_totals(material_totals(project.materials)),
        step_summary=StepSummary.from_totals(step_totals(project.tutorial_steps)),
    )


def _filter_value(value: ProjectStatus | Difficulty | str | None) -> str | None:
    if isinstance(value, (ProjectStatus, Difficulty)):
        return value.value
    return value


@router.get("/", response_model=list[Project])
async def list_projects(
    search: str | None = None,
    status: ProjectStatus | Literal["all"] | None = None,
    difficulty: Difficulty | Literal["all"] | None = None,
    category: str | None = None,
    store: ProjectStore = Depends(get_store),
):
    """List projects in creation order, optionally filtered.

    ``all`` (or omitting the parameter) disables a filter.
    """
    return filter_projects(
        store.projects,
        search=search,
        status=_filter_value(status),
        difficulty=_filter_value(difficulty),
        category=category,
    )


@router.get("/stats", response_model=ProjectStatsResponse)
async def get_stats(store: ProjectStore = Depends(get_store)):
    """Dashboard counters: totals, in-progress, completed, average progress."""
    projects = store.projects
    return ProjectStatsResponse.from_stats(project_stats(projects), categories_in_use(projects))


@router.get("/categories", response_model=list[str])
async def list_categories():
    """Categories offered by the create/edit dialog."""
    return PRESET_CATEGORIES


@router.post("/", response_model=ProjectDetailResponse, status_code=201)
async def create_project(request: ProjectCreateRequest, store: ProjectStore = Depends(get_store)):
    """Create a project. Materials and steps are usually added afterwards."""
    return to_detail(store.create_project(request))


@router.get("/{project_id}", response_model=ProjectDetailResponse)
async def get_project(project_id: str, store: ProjectStore = Depends(get_store)):
    return to_detail(require_project(store, project_id))


@router.patch("/{project_id}", response_model=ProjectDetailResponse)
async def update_project(
    project_id: str,
    request: ProjectUpdateRequest,
    store: ProjectStore = Depends(get_store),
):
    """Partially update a project. Only the keys present in the body change."""
    require_project(store, project_id)
    return to_detail(store.update_project(project_id, request))


@router.delete("/{project_id}", status_code=204)
async def delete_project(project_id: str, store: ProjectStore = Depends(get_store)):
    """Delete a project along with its materials and steps."""
    require_project(store, project_id)
    store.delete_project(project_id)
    return Response(status_code=204)
