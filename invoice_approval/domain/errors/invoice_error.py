"""Invoice domain errors.

Returned (never raised) when an invoice cannot be submitted.

Usage:
    from invoice_approval.domain.errors import InvalidInvoiceError
    from invoice_approval.core.result import Failure

    return Failure(error=InvalidInvoiceError.invalid_amount(amount))
"""

from dataclasses import dataclass
from typing import Self

from invoice_approval.core.enums import ErrorCode
from invoice_approval.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidInvoiceError(DomainError):
    """Invoice submission rejected by a business rule.

    Attributes:
        code: One of INVALID_AMOUNT, INVALID_INVOICE_NUMBER,
            EMPTY_SUBMITTER_ID, EMPTY_SUPERVISOR_ID, DUPLICATE_INVOICE_NUMBER.
        message: Human-readable message.
        details: Offending value, when there is one.
    """

    @classmethod
    def invalid_amount(cls, amount: object) -> Self:
        """Amount is not a finite number, or is zero or negative at cent precision."""
        return cls(
            code=ErrorCode.INVALID_AMOUNT,
            message=f"Invoice amount must be greater than zero. Given: {amount}",
            details={"amount": str(amount)},
        )

    @classmethod
    def amount_too_large(cls, amount: object, limit: object) -> Self:
        """Amount does not fit the stored numeric(15,2) column."""
        return cls(
            code=ErrorCode.INVALID_AMOUNT,
            message=f"Invoice amount must be less than {limit}. Given: {amount}",
            details={"amount": str(amount)},
        )

    @classmethod
    def invalid_number_format(cls, number: str) -> Self:
        """Invoice number does not match INV-YYYY-XXXX."""
        return cls(
            code=ErrorCode.INVALID_INVOICE_NUMBER,
            message=f"Invoice number must be in format INV-YYYY-XXXX. Given: {number}",
            details={"invoice_number": number},
        )

    @classmethod
    def empty_submitter_id(cls) -> Self:
        return cls(
            code=ErrorCode.EMPTY_SUBMITTER_ID,
            message="Submitter ID cannot be empty.",
        )

    @classmethod
    def empty_supervisor_id(cls) -> Self:
        return cls(
            code=ErrorCode.EMPTY_SUPERVISOR_ID,
            message="Supervisor ID cannot be empty.",
        )

    @classmethod
    def duplicate_number(cls, number: str) -> Self:
        """Another invoice already uses this number."""
        return cls(
            code=ErrorCode.DUPLICATE_INVOICE_NUMBER,
            message=f"An invoice with number {number} already exists.",
            details={"invoice_number": number},
        )

    @classmethod
    def not_found(cls, invoice_id: str) -> Self:
        """No invoice stored under this identifier."""
        return cls(
            code=ErrorCode.INVOICE_NOT_FOUND,
            message=f"Invoice with ID {invoice_id} not found.",
            details={"invoice_id": invoice_id},
        )


class DuplicateInvoiceNumberError(Exception):
    """Raised by a repository when the number was taken after the uniqueness check."""

    def __init__(self, invoice_number: str) -> None:
        """Initialize duplicate number error.

        Args:
            invoice_number: Number rejected by the unique constraint.
        """
        super().__init__(f"Invoice number {invoice_number} is already stored")
        self.invoice_number = invoice_number
