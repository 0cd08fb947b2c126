"""Approval queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetApproval:
    """Get a single approval process by ID.

    Attributes:
        approval_id: Approval identifier.
    """

    approval_id: str


@dataclass(frozen=True, kw_only=True)
class GetApprovalByInvoice:
    """Get the approval process of an invoice.

    When more than one exists, the most recently started one is returned.

    Attributes:
        invoice_id: Invoice identifier.
    """

    invoice_id: str
