"""InvoiceRepository protocol (port).

Implementations:
    - InvoiceRepository (SQLAlchemy): invoice_approval/infrastructure/persistence/repositories/invoice_repository.py
    - InMemoryInvoiceRepository: invoice_approval/infrastructure/persistence/repositories/in_memory_invoice_repository.py
"""

from typing import Protocol

from invoice_approval.domain.entities.invoice import Invoice
from invoice_approval.domain.value_objects import InvoiceId, InvoiceNumber


class InvoiceRepository(Protocol):
    """Invoice persistence port.

    Implementations do NOT inherit from this protocol (structural typing).
    """

    def next_identity(self) -> InvoiceId:
        """Mint a fresh, never-used invoice identifier."""
        ...

    async def save(self, invoice: Invoice) -> None:
        """Persist an invoice durably.

        Returns only after the write is committed, so callers may publish
        the invoice's events right after.

        Args:
            invoice: Invoice to store (insert or overwrite by id).

        Raises:
            DuplicateInvoiceNumberError: Another stored invoice has the same
                number.
        """
        ...

    async def find_by_id(self, invoice_id: InvoiceId) -> Invoice | None:
        """Load an invoice.

        Args:
            invoice_id: Identifier to look up.

        Returns:
            Reconstituted invoice (empty event buffer), or None.
        """
        ...

    async def exists_by_number(self, number: InvoiceNumber) -> bool:
        """Check whether any stored invoice uses this number.

        Args:
            number: Invoice number to check.

        Returns:
            True if the number is taken.
        """
        ...
