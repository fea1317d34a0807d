"""
Main FastAPI application entry point.

create_app() assembles the application:
- TraceMiddleware (X-Trace-Id correlation)
- RFC 7807 exception handlers
- API v1 router built from the controller registry
- Lifespan owning the database pool (created at startup, disposed at shutdown)

Run:
    uvicorn crud_backbone.main:app --reload
"""

from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from crud_backbone.core.config import settings
from crud_backbone.core.container import get_database, get_logger
from crud_backbone.infrastructure.persistence.database import Database
from crud_backbone.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
)
from crud_backbone.presentation.routers.api.v1.errors import register_exception_handlers
from crud_backbone.presentation.routers.api.v1.routes.controller import Controller
from crud_backbone.presentation.routers.api.v1.routes.registry import (
    CONTROLLERS,
    build_v1_router,
)


def _database(app: FastAPI) -> Database:
    """Process database, honouring dependency overrides (tests)."""
    factory = app.dependency_overrides.get(get_database, get_database)
    return factory()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: create tables outside production (production runs Alembic)
    - Shutdown: dispose the connection pool

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    database = _database(app)

    if not settings.is_production:
        await database.create_all()

    logger.info(
        "Application started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await database.close()
    logger.info("Application stopped")


def create_app(controllers: Sequence[type[Controller]] = CONTROLLERS) -> FastAPI:
    """Build a FastAPI application serving ``controllers``.

    Args:
        controllers: Controller classes mounted under ``settings.api_v1_prefix``.

    Returns:
        Configured FastAPI application.
    """
    application = FastAPI(
        title=settings.app_name,
        description="Backbone for CRUD HTTP services",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Wire trace middleware (request correlation)
    application.add_middleware(TraceMiddleware)

    # Register global exception handlers (RFC 7807 error responses)
    register_exception_handlers(application)

    # Include API v1 routes (one controller per resource)
    application.include_router(build_v1_router(controllers))

    @application.get("/health", include_in_schema=False)
    async def health() -> JSONResponse:
        """Health check endpoint for monitoring and load balancers."""
        if await _database(application).check_connection():
            return JSONResponse(content={"status": "healthy"})
        return JSONResponse(status_code=503, content={"status": "unhealthy"})

    return application


app = create_app()
