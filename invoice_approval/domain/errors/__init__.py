"""Domain errors.

Usage:
    from invoice_approval.domain.errors import InvalidInvoiceError, InvalidApprovalError
"""

from invoice_approval.domain.errors.approval_error import (
    ApprovalConcurrencyError,
    InvalidApprovalError,
)
from invoice_approval.domain.errors.invoice_error import (
    DuplicateInvoiceNumberError,
    InvalidInvoiceError,
)

__all__ = [
    "ApprovalConcurrencyError",
    "DuplicateInvoiceNumberError",
    "InvalidApprovalError",
    "InvalidInvoiceError",
]
