"""Query handlers."""

from invoice_approval.application.queries.handlers.get_approval_handler import (
    ApprovalResult,
    GetApprovalByInvoiceHandler,
    GetApprovalHandler,
)
from invoice_approval.application.queries.handlers.get_invoice_handler import (
    GetInvoiceHandler,
    InvoiceResult,
)

__all__ = [
    "ApprovalResult",
    "GetApprovalByInvoiceHandler",
    "GetApprovalHandler",
    "GetInvoiceHandler",
    "InvoiceResult",
]
