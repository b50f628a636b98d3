from fastapi import APIRouter

from diy_tracker.api.routes import health, materials, projects, steps

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(materials.router, prefix="/projects", tags=["materials"])
api_router.include_router(steps.router, prefix="/projects", tags=["steps"])
