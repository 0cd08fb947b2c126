"""Unit tests for LoggingEventHandler.

Tests cover:
- One structured log line per workflow event
- INFO for submission, start and approval; WARNING for rejection
- Structured fields (event_type, event_id, occurred_at, ids)

Architecture:
- Unit tests with mocked logger
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from invoice_approval.domain.events import (
    ApprovalProcessStarted,
    InvoiceApproved,
    InvoiceRejected,
    InvoiceSubmitted,
)
from invoice_approval.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)
from tests.conftest import FIXED_TIME


@pytest.fixture
def mock_logger():
    return MagicMock()


@pytest.fixture
def handler(mock_logger):
    return LoggingEventHandler(logger=mock_logger)


@pytest.mark.unit
class TestLoggingEventHandler:
    """Test log output for each event."""

    async def test_invoice_submitted_logs_info(self, handler, mock_logger):
        """Test submission is logged at INFO with invoice details."""
        event = InvoiceSubmitted(
            occurred_at=FIXED_TIME,
            invoice_id="inv-1",
            invoice_number="INV-2024-0001",
            amount=Decimal("1500.50"),
            submitter_id="user-1",
            supervisor_id="sup-1",
        )

        await handler.handle_invoice_submitted(event)

        mock_logger.info.assert_called_once_with(
            "invoice_submitted",
            event_type="InvoiceSubmitted",
            event_id=str(event.event_id),
            occurred_at=FIXED_TIME.isoformat(),
            invoice_id="inv-1",
            invoice_number="INV-2024-0001",
            amount="1500.50",
            submitter_id="user-1",
            supervisor_id="sup-1",
        )

    async def test_approval_process_started_logs_info(self, handler, mock_logger):
        """Test process start is logged at INFO."""
        event = ApprovalProcessStarted(
            approval_id="apr-1", invoice_id="inv-1", approver_id="sup-1"
        )

        await handler.handle_approval_process_started(event)

        mock_logger.info.assert_called_once()
        args, kwargs = mock_logger.info.call_args
        assert args == ("approval_process_started",)
        assert kwargs["approval_id"] == "apr-1"
        assert kwargs["invoice_id"] == "inv-1"
        assert kwargs["approver_id"] == "sup-1"
        assert kwargs["event_type"] == "ApprovalProcessStarted"

    async def test_invoice_approved_logs_info(self, handler, mock_logger):
        """Test approval is logged at INFO."""
        event = InvoiceApproved(
            approval_id="apr-1", invoice_id="inv-1", approver_id="sup-1"
        )

        await handler.handle_invoice_approved(event)

        args, kwargs = mock_logger.info.call_args
        assert args == ("invoice_approved",)
        assert kwargs["event_id"] == str(event.event_id)
        mock_logger.warning.assert_not_called()

    async def test_invoice_rejected_logs_warning_with_reason(self, handler, mock_logger):
        """Test rejection is logged at WARNING and includes the reason."""
        event = InvoiceRejected(
            approval_id="apr-1",
            invoice_id="inv-1",
            approver_id="sup-1",
            reason="Budget exceeded",
        )

        await handler.handle_invoice_rejected(event)

        mock_logger.info.assert_not_called()
        args, kwargs = mock_logger.warning.call_args
        assert args == ("invoice_rejected",)
        assert kwargs["reason"] == "Budget exceeded"
        assert kwargs["occurred_at"] == event.occurred_at.isoformat()
