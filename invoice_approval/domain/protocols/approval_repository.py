"""ApprovalRepository protocol (port).

Implementations:
    - ApprovalRepository (SQLAlchemy): invoice_approval/infrastructure/persistence/repositories/approval_repository.py
    - InMemoryApprovalRepository: invoice_approval/infrastructure/persistence/repositories/in_memory_approval_repository.py
"""

from typing import Protocol

from invoice_approval.domain.entities.approval import Approval
from invoice_approval.domain.value_objects import ApprovalId, InvoiceId


class ApprovalRepository(Protocol):
    """Approval persistence port.

    Implementations do NOT inherit from this protocol (structural typing).

    Lost-update guard:
        Saving an approval that is APPROVED or REJECTED only succeeds if the
        stored record is still PENDING. Otherwise save() raises
        ApprovalConcurrencyError and nothing is written.
    """

    def next_identity(self) -> ApprovalId:
        """Mint a fresh, never-used approval identifier."""
        ...

    async def save(self, approval: Approval) -> None:
        """Persist an approval durably.

        Args:
            approval: Approval to store (insert or update by id).

        Raises:
            ApprovalConcurrencyError: Terminal approval whose stored record
                already left PENDING.
        """
        ...

    async def find_by_id(self, approval_id: ApprovalId) -> Approval | None:
        """Load an approval.

        Returns:
            Reconstituted approval (empty event buffer), or None.
        """
        ...

    async def find_by_invoice_id(self, invoice_id: InvoiceId) -> Approval | None:
        """Load the approval process started for an invoice.

        Returns:
            The most recently started approval for the invoice, or None.
        """
        ...
