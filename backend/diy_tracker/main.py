"""DIY Project Tracker: FastAPI application entry point."""

import uuid
from contextlib import asynccontextmanager

# Logging must be configured before the other app imports: structlog caches
# the processor chain on first use.
from diy_tracker.core.config import get_settings as _get_settings_early
from diy_tracker.core.logging import configure_from_settings

configure_from_settings(_get_settings_early())

import structlog
import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from diy_tracker.api.routes import api_router
from diy_tracker.core.config import Settings, get_settings
from diy_tracker.middleware.correlation import get_correlation_id, setup_correlation_middleware
from diy_tracker.store.persistence import build_snapshot_store
from diy_tracker.store.project_store import ProjectStore
from diy_tracker.store.seed import seed_demo_projects

logger = structlog.get_logger(__name__)


def build_lifespan(settings: Settings, store: ProjectStore | None = None):
    """Create the lifespan handler owning the ProjectStore.

    Startup loads the snapshot (or starts empty) and optionally seeds demo
    projects; shutdown flushes only when changes are still unsaved.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("startup_begin", app_name=settings.app_name, store_backend=settings.store_backend)

        project_store = store or ProjectStore(build_snapshot_store(settings))
        loaded = project_store.load()
        logger.info("store_loaded", project_count=loaded)

        if settings.seed_demo_projects:
            seed_demo_projects(project_store)

        app.state.store = project_store

        yield

        logger.info("shutdown_begin")
        if project_store.has_unsaved_changes:
            project_store.flush()
        app.state.store = None
        logger.info("shutdown_complete")

    return lifespan


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Log HTTP errors with a debug_id and return it alongside the detail."""
    debug_id = str(uuid.uuid4())

    logger.warning(
        "http_exception",
        status_code=exc.status_code,
        debug_id=debug_id,
        correlation_id=get_correlation_id(),
        path=request.url.path,
        method=request.method,
        detail=exc.detail,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "debug_id": debug_id},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled errors with traceback and return a generic 500."""
    debug_id = str(uuid.uuid4())

    logger.error(
        "unhandled_exception",
        debug_id=debug_id,
        correlation_id=get_correlation_id(),
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
        exc_info=True,
    )

    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "debug_id": debug_id},
    )


def create_app(settings: Settings | None = None, store: ProjectStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Overrides the environment-derived settings
        store: Pre-built store (tests inject one with an in-memory backend)
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Track DIY projects, their materials and tutorial steps",
        version="0.1.0",
        lifespan=build_lifespan(settings, store),
    )

    setup_correlation_middleware(app)

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


def serve() -> None:
    """Console entry point: run the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "diy_tracker.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,  # keep the structlog configuration
    )
