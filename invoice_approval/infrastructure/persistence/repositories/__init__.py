"""Repository implementations.

Adapters for the domain repository ports.
"""

from invoice_approval.infrastructure.persistence.repositories.approval_repository import (
    ApprovalRepository,
)
from invoice_approval.infrastructure.persistence.repositories.in_memory_approval_repository import (
    InMemoryApprovalRepository,
)
from invoice_approval.infrastructure.persistence.repositories.in_memory_invoice_repository import (
    InMemoryInvoiceRepository,
)
from invoice_approval.infrastructure.persistence.repositories.invoice_repository import (
    InvoiceRepository,
)

__all__ = [
    "ApprovalRepository",
    "InMemoryApprovalRepository",
    "InMemoryInvoiceRepository",
    "InvoiceRepository",
]
