"""HTTP routers."""

from invoice_approval.presentation.routers.api.v1 import v1_router
from invoice_approval.presentation.routers.system import system_router

__all__ = ["system_router", "v1_router"]
