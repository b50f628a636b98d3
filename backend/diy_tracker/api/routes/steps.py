"""Tutorial step routes. Every mutation responds with the updated project,
so callers see the recomputed progress straight away."""

from fastapi import APIRouter, Depends, HTTPException

from diy_tracker.api.deps import get_store, require_project
from diy_tracker.api.routes.projects import to_detail
from diy_tracker.schemas.projects import (
    ProjectDetailResponse,
    StepCreateRequest,
    StepUpdateRequest,
)
from diy_tracker.store.project_store import ProjectStore

router = APIRouter()


@router.post(
    "/{project_id}/steps",
    response_model=ProjectDetailResponse,
    status_code=201,
)
async def add_step(
    project_id: str,
    request: StepCreateRequest,
    store: ProjectStore = Depends(get_store),
):
    """Append a step to the end of the tutorial."""
    require_project(store, project_id)
    store.add_tutorial_step(project_id, request)
    return to_detail(require_project(store, project_id))


@router.patch("/{project_id}/steps/{step_id}", response_model=ProjectDetailResponse)
async def update_step(
    project_id: str,
    step_id: str,
    request: StepUpdateRequest,
    store: ProjectStore = Depends(get_store),
):
    require_project(store, project_id)
    if store.update_tutorial_step(project_id, step_id, request) is None:
        raise HTTPException(status_code=404, detail="Step not found")
    return to_detail(require_project(store, project_id))


@router.delete("/{project_id}/steps/{step_id}", response_model=ProjectDetailResponse)
async def delete_step(
    project_id: str,
    step_id: str,
    store: ProjectStore = Depends(get_store),
):
    require_project(store, project_id)
    if not store.delete_tutorial_step(project_id, step_id):
        raise HTTPException(status_code=404, detail="Step not found")
    return to_detail(require_project(store, project_id))
