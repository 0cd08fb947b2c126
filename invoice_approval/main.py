"""
Main FastAPI application entry point.

Run with:
    uvicorn invoice_approval.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from invoice_approval.core.config import settings
from invoice_approval.presentation.routers import system_router, v1_router
from invoice_approval.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
)
from invoice_approval.presentation.routers.api.v1.errors import (
    register_exception_handlers,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Create tables (database backend), wire the event bus
    - Shutdown: Dispose the database engine

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    from invoice_approval.core.container import (
        get_database,
        get_event_bus,
        get_logger,
    )

    logger = get_logger()

    if settings.uses_database:
        # Alembic owns the schema in deployed environments; create_all is
        # idempotent and keeps local sqlite runs self-contained.
        await get_database().create_all()

    get_event_bus()
    logger.info(
        "application_started",
        environment=settings.environment.value,
        repository_backend=settings.repository_backend,
    )

    yield

    if settings.uses_database:
        await get_database().close()
    logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Invoice submission and supervisor approval workflow",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
