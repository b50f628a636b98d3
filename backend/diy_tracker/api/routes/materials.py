"""Materials checklist routes. Every mutation responds with the updated project."""

from fastapi import APIRouter, Depends, HTTPException

from diy_tracker.api.deps import get_store, require_project
from diy_tracker.api.routes.projects import to_detail
from diy_tracker.schemas.projects import (
    MaterialCreateRequest,
    MaterialUpdateRequest,
    ProjectDetailResponse,
)
from diy_tracker.store.project_store import ProjectStore

router = APIRouter()


@router.post(
    "/{project_id}/materials",
    response_model=ProjectDetailResponse,
    status_code=201,
)
async def add_material(
    project_id: str,
    request: MaterialCreateRequest,
    store: ProjectStore = Depends(get_store),
):
    require_project(store, project_id)
    store.add_material(project_id, request)
    return to_detail(require_project(store, project_id))


@router.patch("/{project_id}/materials/{material_id}", response_model=ProjectDetailResponse)
async def update_material(
    project_id: str,
    material_id: str,
    request: MaterialUpdateRequest,
    store: ProjectStore = Depends(get_store),
):
    """Partially update a material, e.g. ``{"purchased": true}`` to tick it off."""
    require_project(store, project_id)
    if store.update_material(project_id, material_id, request) is None:
        raise HTTPException(status_code=404, detail="Material not found")
    return to_detail(require_project(store, project_id))


@router.delete("/{project_id}/materials/{material_id}", response_model=ProjectDetailResponse)
async def delete_material(
    project_id: str,
    material_id: str,
    store: ProjectStore = Depends(get_store),
):
    require_project(store, project_id)
    if not store.delete_material(project_id, material_id):
        raise HTTPException(status_code=404, detail="Material not found")
    return to_detail(require_project(store, project_id))
