"""RejectInvoice command handler.

Mirror of ApproveInvoiceHandler for the PENDING → REJECTED transition. The
reason is passed through untouched; length limits are enforced by the
request schema.
"""

from invoice_approval.application.commands.approval_commands import RejectInvoice
from invoice_approval.core.result import Failure, Result, Success
from invoice_approval.domain.entities.approval import Approval
from invoice_approval.domain.errors import (
    ApprovalConcurrencyError,
    InvalidApprovalError,
)
from invoice_approval.domain.protocols.approval_repository import ApprovalRepository
from invoice_approval.domain.protocols.event_bus_protocol import EventBusProtocol
from invoice_approval.domain.value_objects import ApprovalId


class RejectInvoiceHandler:
    """Handler for RejectInvoice command."""

    def __init__(
        self,
        approval_repo: ApprovalRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._approval_repo = approval_repo
        self._event_bus = event_bus

    async def handle(self, cmd: RejectInvoice) -> Result[Approval, InvalidApprovalError]:
        """Handle RejectInvoice command.

        Returns:
            Success(Approval): Approval now REJECTED with the given reason.
            Failure(InvalidApprovalError): Empty id, not found, already
                resolved, or lost a concurrent update.
        """
        id_result = ApprovalId.create(cmd.approval_id)
        if isinstance(id_result, Failure):
            return id_result

        approval = await self._approval_repo.find_by_id(id_result.value)
        if approval is None:
            return Failure(error=InvalidApprovalError.not_found(cmd.approval_id))

        result = approval.reject(cmd.reason)
        if isinstance(result, Failure):
            return result

        try:
            await self._approval_repo.save(approval)
        except ApprovalConcurrencyError as e:
            return Failure(
                error=InvalidApprovalError.concurrent_modification(e.approval_id)
            )

        for event in approval.release_events():
            await self._event_bus.publish(event)

        return Success(value=approval)
