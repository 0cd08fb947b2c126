"""Command handlers."""

from invoice_approval.application.commands.handlers.approve_invoice_handler import (
    ApproveInvoiceHandler,
)
from invoice_approval.application.commands.handlers.reject_invoice_handler import (
    RejectInvoiceHandler,
)
from invoice_approval.application.commands.handlers.start_approval_process_handler import (
    StartApprovalProcessHandler,
)
from invoice_approval.application.commands.handlers.submit_invoice_handler import (
    SubmitInvoiceHandler,
)

__all__ = [
    "ApproveInvoiceHandler",
    "RejectInvoiceHandler",
    "StartApprovalProcessHandler",
    "SubmitInvoiceHandler",
]
