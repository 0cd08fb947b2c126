"""Machine-readable error codes.

Codes follow the ENTITY_REASON naming convention and are carried by every
DomainError. The presentation layer maps them to HTTP statuses.

Categories:
- Invoice validation (INVALID_*, EMPTY_*)
- Approval validation (EMPTY_*)
- State conflicts (APPROVAL_ALREADY_*, APPROVAL_CONFLICT, DUPLICATE_*)
- Lookups (*_NOT_FOUND)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Invoice validation
    INVALID_AMOUNT = "invalid_amount"
    INVALID_INVOICE_NUMBER = "invalid_invoice_number"
    EMPTY_SUBMITTER_ID = "empty_submitter_id"
    EMPTY_SUPERVISOR_ID = "empty_supervisor_id"

    # Approval validation
    EMPTY_INVOICE_ID = "empty_invoice_id"
    EMPTY_APPROVER_ID = "empty_approver_id"
    EMPTY_APPROVAL_ID = "empty_approval_id"

    # Conflicts
    DUPLICATE_INVOICE_NUMBER = "duplicate_invoice_number"
    APPROVAL_ALREADY_APPROVED = "approval_already_approved"
    APPROVAL_ALREADY_REJECTED = "approval_already_rejected"
    APPROVAL_CONFLICT = "approval_conflict"

    # Lookups
    INVOICE_NOT_FOUND = "invoice_not_found"
    APPROVAL_NOT_FOUND = "approval_not_found"
