"""API v1 routers.

Resources:
    /api/v1/invoices   - Invoice submission and lookup
    /api/v1/approvals  - Approval decisions and lookup
"""

from fastapi import APIRouter

from invoice_approval.core.config import settings
from invoice_approval.presentation.routers.api.v1.approvals import (
    router as approvals_router,
)
from invoice_approval.presentation.routers.api.v1.invoices import (
    router as invoices_router,
)

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(invoices_router)
v1_router.include_router(approvals_router)

__all__ = [
    "v1_router",
]
