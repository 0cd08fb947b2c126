"""SubmitInvoice command handler.

Validates and stores a new invoice, then publishes InvoiceSubmitted. The
approval policy is subscribed to that event, so by the time handle()
returns the approval process has been started as well.

Architecture:
- Application layer handler (orchestrates the use case)
- Imports only from domain layer (entities, protocols, errors)
- Business failures returned as Result; infrastructure and policy
  failures propagate as exceptions
"""

from invoice_approval.application.commands.invoice_commands import SubmitInvoice
from invoice_approval.core.result import Failure, Result, Success
from invoice_approval.domain.entities.invoice import Invoice
from invoice_approval.domain.errors import (
    DuplicateInvoiceNumberError,
    InvalidInvoiceError,
)
from invoice_approval.domain.protocols.event_bus_protocol import EventBusProtocol
from invoice_approval.domain.protocols.invoice_repository import InvoiceRepository


class SubmitInvoiceHandler:
    """Handler for SubmitInvoice command.

    Dependencies (injected via constructor):
        - InvoiceRepository: For uniqueness check and persistence
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            invoice_repo: Invoice repository.
            event_bus: Event bus for publishing domain events.
        """
        self._invoice_repo = invoice_repo
        self._event_bus = event_bus

    async def handle(self, cmd: SubmitInvoice) -> Result[Invoice, InvalidInvoiceError]:
        """Handle SubmitInvoice command.

        Args:
            cmd: SubmitInvoice command.

        Returns:
            Success(Invoice): Invoice stored and InvoiceSubmitted published.
            Failure(InvalidInvoiceError): Invalid field or duplicate number.
                Nothing is stored and no event is published.

        Raises:
            ApprovalPolicyError: The invoice was stored but its approval
                process could not be started.
        """
        # Step 1: Build and validate the aggregate (records InvoiceSubmitted)
        result = Invoice.submit(
            id=self._invoice_repo.next_identity(),
            number=cmd.invoice_number,
            amount=cmd.amount,
            submitter_id=cmd.submitter_id,
            supervisor_id=cmd.supervisor_id,
        )
        if isinstance(result, Failure):
            return result
        invoice = result.value

        # Step 2: Invoice numbers are unique
        if await self._invoice_repo.exists_by_number(invoice.number):
            return Failure(error=InvalidInvoiceError.duplicate_number(str(invoice.number)))

        # Step 3: Persist (committed before any event goes out). The unique
        # constraint still decides when two submits race past step 2.
        try:
            await self._invoice_repo.save(invoice)
        except DuplicateInvoiceNumberError as e:
            return Failure(error=InvalidInvoiceError.duplicate_number(e.invoice_number))

        # Step 4: Publish recorded events
        for event in invoice.release_events():
            await self._event_bus.publish(event)

        return Success(value=invoice)
