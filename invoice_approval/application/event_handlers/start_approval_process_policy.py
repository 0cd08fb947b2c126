"""Policy: every submitted invoice gets an approval process.

Reacts to InvoiceSubmitted by issuing StartApprovalProcess with the
invoice's supervisor as approver.

Architecture:
    - Application layer (reactive coordination)
    - App-scoped singleton, subscribed at container startup
    - Runs inside the submitter's publish call, so a failure here reaches
      the SubmitInvoice caller

Pattern:
    1. Listens to InvoiceSubmitted
    2. Dispatches StartApprovalProcess(invoice_id, approver_id=supervisor_id)
    3. Raises ApprovalPolicyError if the command fails
"""

from typing import TYPE_CHECKING

from invoice_approval.application.commands.approval_commands import (
    StartApprovalProcess,
)
from invoice_approval.core.errors import DomainError
from invoice_approval.core.result import Failure
from invoice_approval.domain.events.invoice_events import InvoiceSubmitted
from invoice_approval.domain.protocols.logger_protocol import LoggerProtocol

if TYPE_CHECKING:
    from invoice_approval.application.commands.handlers.start_approval_process_handler import (
        StartApprovalProcessHandler,
    )


class ApprovalPolicyError(Exception):
    """Approval process could not be started for a stored invoice.

    The invoice stays stored without an approval; nothing is rolled back.

    Attributes:
        invoice_id: Invoice left without an approval process.
        error: Failure returned by StartApprovalProcess.
    """

    def __init__(self, invoice_id: str, error: DomainError) -> None:
        super().__init__(
            f"Could not start approval process for invoice {invoice_id}: "
            f"{error.message}"
        )
        self.invoice_id = invoice_id
        self.error = error


class StartApprovalProcessPolicy:
    """Starts the approval process when an invoice is submitted.

    Example:
        >>> policy = StartApprovalProcessPolicy(
        ...     start_approval_handler=handler,
        ...     logger=get_logger(),
        ... )
        >>> event_bus.subscribe(InvoiceSubmitted, policy.handle_invoice_submitted)
    """

    def __init__(
        self,
        start_approval_handler: "StartApprovalProcessHandler",
        logger: LoggerProtocol,
    ) -> None:
        """Initialize policy with dependencies.

        Args:
            start_approval_handler: Handler for StartApprovalProcess.
            logger: Logger protocol implementation from container.
        """
        self._start_approval_handler = start_approval_handler
        self._logger = logger

    async def handle_invoice_submitted(self, event: InvoiceSubmitted) -> None:
        """Open the approval process for a freshly submitted invoice.

        Args:
            event: InvoiceSubmitted event.

        Raises:
            ApprovalPolicyError: If StartApprovalProcess returns a Failure.
        """
        self._logger.info(
            "approval_policy_triggered",
            invoice_id=event.invoice_id,
            approver_id=event.supervisor_id,
        )

        result = await self._start_approval_handler.handle(
            StartApprovalProcess(
                invoice_id=event.invoice_id,
                approver_id=event.supervisor_id,
            )
        )

        if isinstance(result, Failure):
            self._logger.error(
                "approval_policy_failed",
                invoice_id=event.invoice_id,
                error_code=result.error.code.value,
                error_message=result.error.message,
            )
            raise ApprovalPolicyError(event.invoice_id, result.error)

        self._logger.info(
            "approval_policy_completed",
            invoice_id=event.invoice_id,
            approval_id=str(result.value.id),
        )
