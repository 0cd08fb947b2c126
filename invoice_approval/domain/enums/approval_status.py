"""Approval process lifecycle states.

State Machine:
    PENDING → APPROVED
    PENDING → REJECTED

    APPROVED and REJECTED are terminal.

Usage:
    from invoice_approval.domain.enums import ApprovalStatus

    if approval.status is ApprovalStatus.PENDING:
        # Still awaiting a decision
"""

from enum import Enum


class ApprovalStatus(str, Enum):
    """Approval process lifecycle states.

    String Enum:
        Inherits from str for serialization and database storage.
        Values are lowercase.
    """

    PENDING = "pending"
    """Awaiting the approver's decision."""

    APPROVED = "approved"
    """Approver accepted the invoice (terminal)."""

    REJECTED = "rejected"
    """Approver rejected the invoice with a reason (terminal)."""

    def is_pending(self) -> bool:
        """Check if a decision is still outstanding."""
        return self is ApprovalStatus.PENDING

    def is_complete(self) -> bool:
        """Check if the status is terminal."""
        return self in (ApprovalStatus.APPROVED, ApprovalStatus.REJECTED)
