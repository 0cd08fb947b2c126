"""Unit tests for domain events.

Tests cover:
- Auto-generated event_id and occurred_at
- Immutability (frozen dataclasses)
- event_type naming
- Payload fields carried by each workflow event
"""

from dataclasses import FrozenInstanceError
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

import pytest

from invoice_approval.domain.events import (
    ApprovalProcessStarted,
    DomainEvent,
    InvoiceApproved,
    InvoiceRejected,
    InvoiceSubmitted,
)


def _submitted() -> InvoiceSubmitted:
    return InvoiceSubmitted(
        invoice_id="inv-1",
        invoice_number="INV-2024-0001",
        amount=Decimal("1500.50"),
        submitter_id="user-1",
        supervisor_id="sup-1",
    )


@pytest.mark.unit
class TestDomainEventBase:
    """Test metadata shared by all events."""

    def test_event_id_is_generated(self):
        """Test each event gets its own UUID."""
        first = _submitted()
        second = _submitted()

        assert isinstance(first.event_id, UUID)
        assert first.event_id != second.event_id

    def test_occurred_at_defaults_to_utc_now(self):
        """Test occurred_at is timezone-aware and current."""
        before = datetime.now(UTC)

        event = _submitted()

        assert event.occurred_at.tzinfo is not None
        assert before <= event.occurred_at <= datetime.now(UTC)

    def test_events_are_frozen(self):
        """Test payload fields cannot be reassigned."""
        event = _submitted()

        with pytest.raises(FrozenInstanceError):
            event.invoice_id = "other"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "event,name",
        [
            (_submitted(), "InvoiceSubmitted"),
            (
                ApprovalProcessStarted(
                    approval_id="apr-1", invoice_id="inv-1", approver_id="sup-1"
                ),
                "ApprovalProcessStarted",
            ),
            (
                InvoiceApproved(
                    approval_id="apr-1", invoice_id="inv-1", approver_id="sup-1"
                ),
                "InvoiceApproved",
            ),
            (
                InvoiceRejected(
                    approval_id="apr-1",
                    invoice_id="inv-1",
                    approver_id="sup-1",
                    reason="Budget exceeded",
                ),
                "InvoiceRejected",
            ),
        ],
    )
    def test_event_type_is_class_name(self, event, name):
        """Test event_type reports the concrete event class."""
        assert isinstance(event, DomainEvent)
        assert event.event_type == name

    def test_payload_fields_are_keyword_only(self):
        """Test events cannot be built positionally."""
        with pytest.raises(TypeError):
            InvoiceApproved("apr-1", "inv-1", "sup-1")  # type: ignore[misc]


@pytest.mark.unit
class TestInvoiceRejectedPayload:
    """Test InvoiceRejected carries the reason."""

    def test_reason_is_carried(self):
        event = InvoiceRejected(
            approval_id="apr-1",
            invoice_id="inv-1",
            approver_id="sup-1",
            reason="Missing receipt",
        )

        assert event.reason == "Missing receipt"
