"""Application commands (CQRS write side)."""

from invoice_approval.application.commands.approval_commands import (
    ApproveInvoice,
    RejectInvoice,
    StartApprovalProcess,
)
from invoice_approval.application.commands.invoice_commands import SubmitInvoice

__all__ = [
    "ApproveInvoice",
    "RejectInvoice",
    "StartApprovalProcess",
    "SubmitInvoice",
]
