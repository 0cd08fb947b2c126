"""Application queries (CQRS read side)."""

from invoice_approval.application.queries.approval_queries import (
    GetApproval,
    GetApprovalByInvoice,
)
from invoice_approval.application.queries.invoice_queries import GetInvoice

__all__ = ["GetApproval", "GetApprovalByInvoice", "GetInvoice"]
