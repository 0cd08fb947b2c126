"""Invoice aggregate.

An invoice is submitted once and never changes afterwards. Submission
validates every field and records InvoiceSubmitted, which the approval
policy reacts to.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Factory methods instead of a public mutating API
    - Validation failures returned as Result, not raised

Usage:
    from invoice_approval.domain.entities import Invoice

    match Invoice.submit(
        id=invoice_repo.next_identity(),
        number="INV-2024-0001",
        amount=Decimal("1500.50"),
        submitter_id="user-1",
        supervisor_id="sup-1",
    ):
        case Success(value=invoice):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal
from typing import Self

from invoice_approval.core.result import Failure, Result, Success
from invoice_approval.domain.entities.aggregate_root import AggregateRoot
from invoice_approval.domain.errors import InvalidInvoiceError
from invoice_approval.domain.events.invoice_events import InvoiceSubmitted
from invoice_approval.domain.value_objects import (
    Amount,
    InvoiceId,
    InvoiceNumber,
    SubmitterId,
    SupervisorId,
)


@dataclass(frozen=True, kw_only=True)
class Invoice(AggregateRoot):
    """Submitted invoice awaiting (or past) approval.

    Frozen: every field is fixed once the invoice is submitted.

    Attributes:
        id: Invoice identifier.
        number: Business invoice number, unique across invoices.
        amount: Positive invoice amount.
        submitter_id: User who submitted the invoice.
        supervisor_id: Supervisor who becomes the approver.
        submitted_at: Submission timestamp (UTC).

    Example:
        >>> result = Invoice.submit(
        ...     id=InvoiceId("inv-1"),
        ...     number="INV-2024-0001",
        ...     amount="1500.50",
        ...     submitter_id="user-1",
        ...     supervisor_id="sup-1",
        ... )
        >>> invoice = result.value
        >>> [type(e).__name__ for e in invoice.release_events()]
        ['InvoiceSubmitted']
    """

    id: InvoiceId
    number: InvoiceNumber
    amount: Amount
    submitter_id: SubmitterId
    supervisor_id: SupervisorId
    submitted_at: datetime

    @classmethod
    def submit(
        cls,
        *,
        id: InvoiceId,
        number: str,
        amount: Decimal | int | float | str,
        submitter_id: str,
        supervisor_id: str,
        submitted_at: datetime | None = None,
    ) -> Result[Self, InvalidInvoiceError]:
        """Submit a new invoice.

        Validation order: number, amount, submitter, supervisor. The first
        violation wins.

        Args:
            id: Identifier minted by the invoice repository.
            number: Invoice number (INV-YYYY-XXXX).
            amount: Amount greater than zero.
            submitter_id: Submitting user.
            supervisor_id: Supervisor who must approve.
            submitted_at: Submission time; defaults to now (UTC).

        Returns:
            Success(Invoice) with exactly one InvoiceSubmitted recorded.
            Failure(InvalidInvoiceError) if any field is invalid.
        """
        number_result = InvoiceNumber.create(number)
        if isinstance(number_result, Failure):
            return number_result

        amount_result = Amount.create(amount)
        if isinstance(amount_result, Failure):
            return amount_result

        try:
            submitter = SubmitterId(submitter_id)
        except ValueError:
            return Failure(error=InvalidInvoiceError.empty_submitter_id())

        try:
            supervisor = SupervisorId(supervisor_id)
        except ValueError:
            return Failure(error=InvalidInvoiceError.empty_supervisor_id())

        now = submitted_at or datetime.now(UTC)
        invoice = cls(
            id=id,
            number=number_result.value,
            amount=amount_result.value,
            submitter_id=submitter,
            supervisor_id=supervisor,
            submitted_at=now,
        )
        invoice._record_event(
            InvoiceSubmitted(
                occurred_at=now,
                invoice_id=str(invoice.id),
                invoice_number=str(invoice.number),
                amount=invoice.amount.value,
                submitter_id=str(invoice.submitter_id),
                supervisor_id=str(invoice.supervisor_id),
            )
        )
        return Success(value=invoice)

    @classmethod
    def reconstitute(
        cls,
        *,
        id: str,
        number: str,
        amount: Decimal,
        submitter_id: str,
        supervisor_id: str,
        submitted_at: datetime,
    ) -> Self:
        """Rebuild a stored invoice without recording events.

        Raises:
            ValueError: If stored data violates a value object rule.
        """
        return cls(
            id=InvoiceId(id),
            number=InvoiceNumber(number),
            amount=Amount(amount),
            submitter_id=SubmitterId(submitter_id),
            supervisor_id=SupervisorId(supervisor_id),
            submitted_at=submitted_at,
        )
