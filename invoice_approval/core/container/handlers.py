"""Handler dependency factories.

Request-scoped handler instances built from app-scoped repositories and
the event bus. Used by the routers via FastAPI Depends and overridable
through app.dependency_overrides in tests.
"""

from typing import TYPE_CHECKING

from invoice_approval.core.container.events import get_event_bus
from invoice_approval.core.container.repositories import (
    get_approval_repository,
    get_invoice_repository,
)

if TYPE_CHECKING:
    from invoice_approval.application.commands.handlers import (
        ApproveInvoiceHandler,
        RejectInvoiceHandler,
        SubmitInvoiceHandler,
    )
    from invoice_approval.application.queries.handlers import (
        GetApprovalByInvoiceHandler,
        GetApprovalHandler,
        GetInvoiceHandler,
    )


# ============================================================================
# Command Handler Factories
# ============================================================================


def get_submit_invoice_handler() -> "SubmitInvoiceHandler":
    """Get SubmitInvoice command handler.

    Returns:
        SubmitInvoiceHandler wired to the invoice repository and event bus.
    """
    from invoice_approval.application.commands.handlers import SubmitInvoiceHandler

    return SubmitInvoiceHandler(
        invoice_repo=get_invoice_repository(),
        event_bus=get_event_bus(),
    )


def get_approve_invoice_handler() -> "ApproveInvoiceHandler":
    """Get ApproveInvoice command handler."""
    from invoice_approval.application.commands.handlers import ApproveInvoiceHandler

    return ApproveInvoiceHandler(
        approval_repo=get_approval_repository(),
        event_bus=get_event_bus(),
    )


def get_reject_invoice_handler() -> "RejectInvoiceHandler":
    """Get RejectInvoice command handler."""
    from invoice_approval.application.commands.handlers import RejectInvoiceHandler

    return RejectInvoiceHandler(
        approval_repo=get_approval_repository(),
        event_bus=get_event_bus(),
    )


# ============================================================================
# Query Handler Factories
# ============================================================================


def get_get_invoice_handler() -> "GetInvoiceHandler":
    from invoice_approval.application.queries.handlers import GetInvoiceHandler

    return GetInvoiceHandler(invoice_repo=get_invoice_repository())


def get_get_approval_handler() -> "GetApprovalHandler":
    from invoice_approval.application.queries.handlers import GetApprovalHandler

    return GetApprovalHandler(approval_repo=get_approval_repository())


def get_get_approval_by_invoice_handler() -> "GetApprovalByInvoiceHandler":
    from invoice_approval.application.queries.handlers import (
        GetApprovalByInvoiceHandler,
    )

    return GetApprovalByInvoiceHandler(approval_repo=get_approval_repository())
