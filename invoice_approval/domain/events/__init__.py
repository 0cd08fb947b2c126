"""Domain events.

Usage:
    from invoice_approval.domain.events import InvoiceSubmitted
"""

from invoice_approval.domain.events.approval_events import (
    ApprovalProcessStarted,
    InvoiceApproved,
    InvoiceRejected,
)
from invoice_approval.domain.events.base_event import DomainEvent
from invoice_approval.domain.events.invoice_events import InvoiceSubmitted

__all__ = [
    "ApprovalProcessStarted",
    "DomainEvent",
    "InvoiceApproved",
    "InvoiceRejected",
    "InvoiceSubmitted",
]
