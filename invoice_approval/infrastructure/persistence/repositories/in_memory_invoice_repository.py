"""In-memory InvoiceRepository.

Backs the "memory" repository backend and fast tests. Invoices are stored
as plain snapshots and rebuilt on every read, so callers never share an
aggregate instance with the store.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from uuid_extensions import uuid7

from invoice_approval.domain.entities.invoice import Invoice
from invoice_approval.domain.errors import DuplicateInvoiceNumberError
from invoice_approval.domain.value_objects import InvoiceId, InvoiceNumber


@dataclass(frozen=True, slots=True)
class _InvoiceRecord:
    id: str
    number: str
    amount: Decimal
    submitter_id: str
    supervisor_id: str
    submitted_at: datetime


class InMemoryInvoiceRepository:
    """Dictionary-backed invoice store.

    This class does NOT inherit from the protocol (Protocol uses structural typing).
    """

    def __init__(self) -> None:
        self._records: dict[str, _InvoiceRecord] = {}

    def next_identity(self) -> InvoiceId:
        return InvoiceId(str(uuid7()))

    async def save(self, invoice: Invoice) -> None:
        """Store a snapshot of the invoice (insert or overwrite by id).

        Raises:
            DuplicateInvoiceNumberError: Another invoice already uses the number.
        """
        for record in self._records.values():
            if record.number == str(invoice.number) and record.id != str(invoice.id):
                raise DuplicateInvoiceNumberError(str(invoice.number))

        self._records[str(invoice.id)] = _InvoiceRecord(
            id=str(invoice.id),
            number=str(invoice.number),
            amount=invoice.amount.to_cents(),
            submitter_id=str(invoice.submitter_id),
            supervisor_id=str(invoice.supervisor_id),
            submitted_at=invoice.submitted_at,
        )

    async def find_by_id(self, invoice_id: InvoiceId) -> Invoice | None:
        record = self._records.get(str(invoice_id))
        if record is None:
            return None
        return self._to_domain(record)

    async def exists_by_number(self, number: InvoiceNumber) -> bool:
        return any(record.number == str(number) for record in self._records.values())

    def all(self) -> list[Invoice]:
        """Every stored invoice, in insertion order."""
        return [self._to_domain(record) for record in self._records.values()]

    def clear(self) -> None:
        """Remove every stored invoice."""
        self._records.clear()

    def _to_domain(self, record: _InvoiceRecord) -> Invoice:
        return Invoice.reconstitute(
            id=record.id,
            number=record.number,
            amount=record.amount,
            submitter_id=record.submitter_id,
            supervisor_id=record.supervisor_id,
            submitted_at=record.submitted_at,
        )
