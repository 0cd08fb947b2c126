"""ApproveInvoice command handler.

Loads the approval, moves it PENDING → APPROVED, stores it and publishes
InvoiceApproved. A concurrent writer that resolved the approval first
surfaces as an APPROVAL_CONFLICT failure.
"""

from invoice_approval.application.commands.approval_commands import ApproveInvoice
from invoice_approval.core.result import Failure, Result, Success
from invoice_approval.domain.entities.approval import Approval
from invoice_approval.domain.errors import (
    ApprovalConcurrencyError,
    InvalidApprovalError,
)
from invoice_approval.domain.protocols.approval_repository import ApprovalRepository
from invoice_approval.domain.protocols.event_bus_protocol import EventBusProtocol
from invoice_approval.domain.value_objects import ApprovalId


class ApproveInvoiceHandler:
    """Handler for ApproveInvoice command.

    Dependencies (injected via constructor):
        - ApprovalRepository: For loading and persistence
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        approval_repo: ApprovalRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._approval_repo = approval_repo
        self._event_bus = event_bus

    async def handle(self, cmd: ApproveInvoice) -> Result[Approval, InvalidApprovalError]:
        """Handle ApproveInvoice command.

        Args:
            cmd: ApproveInvoice command.

        Returns:
            Success(Approval): Approval now APPROVED.
            Failure(InvalidApprovalError): Empty id, not found, already
                resolved, or lost a concurrent update.
        """
        # Step 1: Load
        id_result = ApprovalId.create(cmd.approval_id)
        if isinstance(id_result, Failure):
            return id_result

        approval = await self._approval_repo.find_by_id(id_result.value)
        if approval is None:
            return Failure(error=InvalidApprovalError.not_found(cmd.approval_id))

        # Step 2: Transition
        result = approval.approve()
        if isinstance(result, Failure):
            return result

        # Step 3: Persist (conditional on the stored row still being pending)
        try:
            await self._approval_repo.save(approval)
        except ApprovalConcurrencyError as e:
            return Failure(
                error=InvalidApprovalError.concurrent_modification(e.approval_id)
            )

        # Step 4: Publish
        for event in approval.release_events():
            await self._event_bus.publish(event)

        return Success(value=approval)
