"""Get invoice query handler."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from invoice_approval.application.queries.invoice_queries import GetInvoice
from invoice_approval.core.errors import DomainError
from invoice_approval.core.result import Failure, Result, Success
from invoice_approval.domain.errors import InvalidInvoiceError
from invoice_approval.domain.protocols.invoice_repository import InvoiceRepository
from invoice_approval.domain.value_objects import InvoiceId


@dataclass
class InvoiceResult:
    """Invoice query result."""

    id: str
    invoice_number: str
    amount: Decimal
    submitter_id: str
    supervisor_id: str
    submitted_at: datetime


class GetInvoiceHandler:
    """Handler for getting a single invoice."""

    def __init__(self, invoice_repo: InvoiceRepository) -> None:
        """Initialize handler with dependencies.

        Args:
            invoice_repo: Invoice repository.
        """
        self._invoice_repo = invoice_repo

    async def handle(self, query: GetInvoice) -> Result[InvoiceResult, DomainError]:
        """Handle get invoice query.

        Returns:
            Success(InvoiceResult) with invoice data.
            Failure(InvalidInvoiceError) if the id is empty or unknown.
        """
        # Step 1: Validate id
        id_result = InvoiceId.create(query.invoice_id)
        if isinstance(id_result, Failure):
            return id_result

        # Step 2: Load
        invoice = await self._invoice_repo.find_by_id(id_result.value)
        if invoice is None:
            return Failure(error=InvalidInvoiceError.not_found(query.invoice_id))

        # Step 3: Return result
        return Success(
            value=InvoiceResult(
                id=str(invoice.id),
                invoice_number=str(invoice.number),
                amount=invoice.amount.to_cents(),
                submitter_id=str(invoice.submitter_id),
                supervisor_id=str(invoice.supervisor_id),
                submitted_at=invoice.submitted_at,
            )
        )
