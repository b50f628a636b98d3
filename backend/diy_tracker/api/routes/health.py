from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """Liveness check. Reports how many projects the store currently holds."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        return JSONResponse(
            status_code=503,
            content={"status": "starting", "service": "diy-tracker"},
        )
    return {"status": "healthy", "service": "diy-tracker", "projects": store.project_count}
