"""Approval domain events.

Pattern: one start event followed by exactly one terminal event
(ApprovalProcessStarted → InvoiceApproved | InvoiceRejected).

Handlers:
- LoggingEventHandler: ALL events
"""

from dataclasses import dataclass

from invoice_approval.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class ApprovalProcessStarted(DomainEvent):
    """Approval process opened in PENDING for an invoice.

    Attributes:
        approval_id: New approval process.
        invoice_id: Invoice awaiting a decision.
        approver_id: User expected to decide.
    """

    approval_id: str
    invoice_id: str
    approver_id: str


@dataclass(frozen=True, kw_only=True)
class InvoiceApproved(DomainEvent):
    """Approver accepted the invoice.

    Attributes:
        approval_id: Resolved approval process.
        invoice_id: Approved invoice.
        approver_id: User who approved.
    """

    approval_id: str
    invoice_id: str
    approver_id: str


@dataclass(frozen=True, kw_only=True)
class InvoiceRejected(DomainEvent):
    """Approver rejected the invoice.

    Attributes:
        approval_id: Resolved approval process.
        invoice_id: Rejected invoice.
        approver_id: User who rejected.
        reason: Rejection reason as given by the approver.
    """

    approval_id: str
    invoice_id: str
    approver_id: str
    reason: str
