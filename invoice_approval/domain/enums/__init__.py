"""Domain enums."""

from invoice_approval.domain.enums.approval_status import ApprovalStatus

__all__ = ["ApprovalStatus"]
