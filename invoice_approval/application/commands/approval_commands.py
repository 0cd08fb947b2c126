"""Approval commands (CQRS write operations).

State Transitions:
    StartApprovalProcess: (none) → PENDING
    ApproveInvoice:       PENDING → APPROVED
    RejectInvoice:        PENDING → REJECTED
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class StartApprovalProcess:
    """Open an approval process for a submitted invoice.

    Normally issued by the approval policy, not by clients.

    Attributes:
        invoice_id: Invoice to decide on.
        approver_id: User expected to decide.
    """

    invoice_id: str
    approver_id: str


@dataclass(frozen=True, kw_only=True)
class ApproveInvoice:
    """Approve the invoice behind an approval process.

    Attributes:
        approval_id: Approval process to resolve.
    """

    approval_id: str


@dataclass(frozen=True, kw_only=True)
class RejectInvoice:
    """Reject the invoice behind an approval process.

    Attributes:
        approval_id: Approval process to resolve.
        reason: Why the invoice is rejected.
    """

    approval_id: str
    reason: str
