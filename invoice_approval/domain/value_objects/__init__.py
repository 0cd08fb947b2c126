"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from invoice_approval.domain.value_objects.amount import Amount
from invoice_approval.domain.value_objects.identifiers import (
    ApprovalId,
    ApproverId,
    Identifier,
    InvoiceId,
    SubmitterId,
    SupervisorId,
)
from invoice_approval.domain.value_objects.invoice_number import InvoiceNumber

__all__ = [
    "Amount",
    "ApprovalId",
    "ApproverId",
    "Identifier",
    "InvoiceId",
    "InvoiceNumber",
    "SubmitterId",
    "SupervisorId",
]
