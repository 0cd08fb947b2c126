"""Domain entities for business logic.

Pure business logic aggregates with no framework dependencies.
"""

from invoice_approval.domain.entities.aggregate_root import AggregateRoot
from invoice_approval.domain.entities.approval import Approval
from invoice_approval.domain.entities.invoice import Invoice

__all__ = [
    "AggregateRoot",
    "Approval",
    "Invoice",
]
