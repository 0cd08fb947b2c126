"""System router for non-versioned application endpoints.

Lightweight, side-effect free endpoints for health checks and basic
diagnostics.
"""

from fastapi import APIRouter

from invoice_approval.core.config import settings


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Service name, status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        dict[str, str]: Health status and active repository backend.
    """
    return {"status": "healthy", "repository_backend": settings.repository_backend}
