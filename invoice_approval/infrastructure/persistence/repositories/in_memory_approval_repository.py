"""In-memory ApprovalRepository.

Same contract as the SQLAlchemy adapter, including the lost-update guard:
an existing record is only overwritten while it is still pending. Reads
return fresh aggregates built from stored snapshots.
"""

from dataclasses import dataclass
from datetime import datetime

from uuid_extensions import uuid7

from invoice_approval.domain.entities.approval import Approval
from invoice_approval.domain.enums.approval_status import ApprovalStatus
from invoice_approval.domain.errors import ApprovalConcurrencyError
from invoice_approval.domain.value_objects import ApprovalId, InvoiceId


@dataclass(frozen=True, slots=True)
class _ApprovalRecord:
    id: str
    invoice_id: str
    approver_id: str
    status: ApprovalStatus
    started_at: datetime
    completed_at: datetime | None
    rejection_reason: str | None


class InMemoryApprovalRepository:
    """Dictionary-backed approval store.

    This class does NOT inherit from the protocol (Protocol uses structural typing).
    """

    def __init__(self) -> None:
        self._records: dict[str, _ApprovalRecord] = {}

    def next_identity(self) -> ApprovalId:
        return ApprovalId(str(uuid7()))

    async def save(self, approval: Approval) -> None:
        """Store a snapshot of the approval.

        Raises:
            ApprovalConcurrencyError: Stored record is no longer pending.
        """
        existing = self._records.get(str(approval.id))
        if existing is not None and not existing.status.is_pending():
            raise ApprovalConcurrencyError(str(approval.id))

        self._records[str(approval.id)] = _ApprovalRecord(
            id=str(approval.id),
            invoice_id=str(approval.invoice_id),
            approver_id=str(approval.approver_id),
            status=approval.status,
            started_at=approval.started_at,
            completed_at=approval.completed_at,
            rejection_reason=approval.rejection_reason,
        )

    async def find_by_id(self, approval_id: ApprovalId) -> Approval | None:
        record = self._records.get(str(approval_id))
        if record is None:
            return None
        return self._to_domain(record)

    async def find_by_invoice_id(self, invoice_id: InvoiceId) -> Approval | None:
        matches = [
            record
            for record in self._records.values()
            if record.invoice_id == str(invoice_id)
        ]
        if not matches:
            return None
        return self._to_domain(max(matches, key=lambda record: record.started_at))

    def all(self) -> list[Approval]:
        """Every stored approval, in insertion order."""
        return [self._to_domain(record) for record in self._records.values()]

    def clear(self) -> None:
        """Remove every stored approval."""
        self._records.clear()

    def _to_domain(self, record: _ApprovalRecord) -> Approval:
        return Approval.reconstitute(
            id=record.id,
            invoice_id=record.invoice_id,
            approver_id=record.approver_id,
            status=record.status,
            started_at=record.started_at,
            completed_at=record.completed_at,
            rejection_reason=record.rejection_reason,
        )
