"""Logging event handler for domain events.

Writes one structured log line per workflow event.

Log Levels:
    - INFO: submission, start, approval
    - WARNING: rejection (an invoice will not be paid)

Structured Fields:
    - event_type: Event class name
    - event_id: Event UUID for correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - invoice_id / approval_id / approver_id: as carried by the event
"""

from invoice_approval.domain.events.approval_events import (
    ApprovalProcessStarted,
    InvoiceApproved,
    InvoiceRejected,
)
from invoice_approval.domain.events.invoice_events import InvoiceSubmitted
from invoice_approval.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of workflow events.

    Attributes:
        _logger: Logger protocol implementation (from container).

    Example:
        >>> handler = LoggingEventHandler(logger=get_logger())
        >>> event_bus.subscribe(InvoiceSubmitted, handler.handle_invoice_submitted)
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize logging handler with logger.

        Args:
            logger: Logger protocol implementation.
        """
        self._logger = logger

    async def handle_invoice_submitted(self, event: InvoiceSubmitted) -> None:
        self._logger.info(
            "invoice_submitted",
            event_type=event.event_type,
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            invoice_id=event.invoice_id,
            invoice_number=event.invoice_number,
            amount=str(event.amount),
            submitter_id=event.submitter_id,
            supervisor_id=event.supervisor_id,
        )

    async def handle_approval_process_started(
        self, event: ApprovalProcessStarted
    ) -> None:
        self._logger.info(
            "approval_process_started",
            event_type=event.event_type,
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            approval_id=event.approval_id,
            invoice_id=event.invoice_id,
            approver_id=event.approver_id,
        )

    async def handle_invoice_approved(self, event: InvoiceApproved) -> None:
        self._logger.info(
            "invoice_approved",
            event_type=event.event_type,
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            approval_id=event.approval_id,
            invoice_id=event.invoice_id,
            approver_id=event.approver_id,
        )

    async def handle_invoice_rejected(self, event: InvoiceRejected) -> None:
        """Log a rejection (WARNING, the invoice will not be paid)."""
        self._logger.warning(
            "invoice_rejected",
            event_type=event.event_type,
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            approval_id=event.approval_id,
            invoice_id=event.invoice_id,
            approver_id=event.approver_id,
            reason=event.reason,
        )
