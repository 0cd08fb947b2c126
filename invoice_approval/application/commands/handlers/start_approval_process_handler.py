"""StartApprovalProcess command handler.

Opens a PENDING approval for an invoice and publishes
ApprovalProcessStarted.
"""

from invoice_approval.application.commands.approval_commands import (
    StartApprovalProcess,
)
from invoice_approval.core.errors import DomainError
from invoice_approval.core.result import Failure, Result, Success
from invoice_approval.domain.entities.approval import Approval
from invoice_approval.domain.protocols.approval_repository import ApprovalRepository
from invoice_approval.domain.protocols.event_bus_protocol import EventBusProtocol
from invoice_approval.domain.value_objects import ApproverId


class StartApprovalProcessHandler:
    """Handler for StartApprovalProcess command.

    Dependencies (injected via constructor):
        - ApprovalRepository: For persistence
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        approval_repo: ApprovalRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            approval_repo: Approval repository.
            event_bus: Event bus for publishing domain events.
        """
        self._approval_repo = approval_repo
        self._event_bus = event_bus

    async def handle(self, cmd: StartApprovalProcess) -> Result[Approval, DomainError]:
        """Handle StartApprovalProcess command.

        Args:
            cmd: StartApprovalProcess command.

        Returns:
            Success(Approval): PENDING approval stored and event published.
            Failure(InvalidApprovalError): Empty approver or invoice id.
        """
        # Step 1: Validate approver
        approver_result = ApproverId.create(cmd.approver_id)
        if isinstance(approver_result, Failure):
            return approver_result

        # Step 2: Open the process
        result = Approval.start(
            id=self._approval_repo.next_identity(),
            invoice_id=cmd.invoice_id,
            approver_id=approver_result.value,
        )
        if isinstance(result, Failure):
            return result
        approval = result.value

        # Step 3: Persist, then publish
        await self._approval_repo.save(approval)

        for event in approval.release_events():
            await self._event_bus.publish(event)

        return Success(value=approval)
