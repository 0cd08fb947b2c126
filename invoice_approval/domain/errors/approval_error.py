"""Approval domain errors.

InvalidApprovalError is returned (never raised) when an approval cannot be
started or resolved. ApprovalConcurrencyError is the one exception in this
module: repositories raise it when a conditional write finds that the stored
approval already left PENDING, and the approve/reject handlers turn it back
into an InvalidApprovalError.

Usage:
    from invoice_approval.domain.errors import InvalidApprovalError

    return Failure(error=InvalidApprovalError.already_approved())
"""

from dataclasses import dataclass
from typing import Self

from invoice_approval.core.enums import ErrorCode
from invoice_approval.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidApprovalError(DomainError):
    """Approval start or transition rejected by a business rule.

    Attributes:
        code: One of EMPTY_INVOICE_ID, EMPTY_APPROVER_ID,
            APPROVAL_ALREADY_APPROVED, APPROVAL_ALREADY_REJECTED,
            APPROVAL_NOT_FOUND, APPROVAL_CONFLICT.
        message: Human-readable message.
        details: Approval or invoice identifier, when known.
    """

    @classmethod
    def empty_invoice_id(cls) -> Self:
        return cls(
            code=ErrorCode.EMPTY_INVOICE_ID,
            message="Invoice ID cannot be empty.",
        )

    @classmethod
    def empty_approver_id(cls) -> Self:
        return cls(
            code=ErrorCode.EMPTY_APPROVER_ID,
            message="Approver ID cannot be empty.",
        )

    @classmethod
    def empty_approval_id(cls) -> Self:
        return cls(
            code=ErrorCode.EMPTY_APPROVAL_ID,
            message="Approval ID cannot be empty.",
        )

    @classmethod
    def already_approved(cls) -> Self:
        return cls(
            code=ErrorCode.APPROVAL_ALREADY_APPROVED,
            message="Cannot modify an already approved invoice.",
        )

    @classmethod
    def already_rejected(cls) -> Self:
        return cls(
            code=ErrorCode.APPROVAL_ALREADY_REJECTED,
            message="Cannot modify an already rejected invoice.",
        )

    @classmethod
    def not_found(cls, approval_id: str) -> Self:
        return cls(
            code=ErrorCode.APPROVAL_NOT_FOUND,
            message=f"Approval with ID {approval_id} not found.",
            details={"approval_id": approval_id},
        )

    @classmethod
    def not_found_for_invoice(cls, invoice_id: str) -> Self:
        return cls(
            code=ErrorCode.APPROVAL_NOT_FOUND,
            message=f"No approval process found for invoice {invoice_id}.",
            details={"invoice_id": invoice_id},
        )

    @classmethod
    def concurrent_modification(cls, approval_id: str) -> Self:
        """Another writer resolved the approval first."""
        return cls(
            code=ErrorCode.APPROVAL_CONFLICT,
            message=(
                f"Approval with ID {approval_id} was resolved by another request."
            ),
            details={"approval_id": approval_id},
        )


class ApprovalConcurrencyError(Exception):
    """Raised when saving a resolved approval whose stored row is no longer pending."""

    def __init__(self, approval_id: str) -> None:
        """Initialize concurrency error.

        Args:
            approval_id: Approval whose conditional write matched no row.
        """
        super().__init__(f"Approval {approval_id} is no longer pending")
        self.approval_id = approval_id
