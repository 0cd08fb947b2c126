"""Pytest configuration shared by all test suites.

This configuration ensures:
1. Settings load in the testing environment (JSON logs, memory backend)
2. Async tests are marked automatically
3. Domain helpers build valid aggregates with minimal noise
"""

import inspect
import os
from datetime import UTC, datetime
from decimal import Decimal

# Must run before invoice_approval.core.config is imported anywhere
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("REPOSITORY_BACKEND", "memory")

import pytest  # noqa: E402

from invoice_approval.domain.entities.approval import Approval  # noqa: E402
from invoice_approval.domain.entities.invoice import Invoice  # noqa: E402
from invoice_approval.domain.enums.approval_status import ApprovalStatus  # noqa: E402
from invoice_approval.domain.value_objects import (  # noqa: E402
    ApprovalId,
    ApproverId,
    InvoiceId,
)

FIXED_TIME = datetime(2024, 1, 15, 10, 30, 0, tzinfo=UTC)


# Test helper functions for domain entities


def create_invoice(
    invoice_id: str = "inv-1",
    number: str = "INV-2024-0001",
    amount: Decimal | int | float | str = Decimal("1500.50"),
    submitter_id: str = "user-1",
    supervisor_id: str = "sup-1",
    submitted_at: datetime | None = FIXED_TIME,
) -> Invoice:
    """Helper to submit a valid Invoice for testing.

    The InvoiceSubmitted event stays in the buffer; call release_events()
    to inspect or discard it.
    """
    result = Invoice.submit(
        id=InvoiceId(invoice_id),
        number=number,
        amount=amount,
        submitter_id=submitter_id,
        supervisor_id=supervisor_id,
        submitted_at=submitted_at,
    )
    return result.value  # type: ignore[union-attr]


def create_pending_approval(
    approval_id: str = "apr-1",
    invoice_id: str = "inv-1",
    approver_id: str = "sup-1",
    started_at: datetime | None = FIXED_TIME,
) -> Approval:
    """Helper to start a PENDING Approval for testing (event buffer cleared)."""
    result = Approval.start(
        id=ApprovalId(approval_id),
        invoice_id=invoice_id,
        approver_id=ApproverId(approver_id),
        started_at=started_at,
    )
    approval = result.value  # type: ignore[union-attr]
    approval.release_events()
    return approval


def create_resolved_approval(
    status: ApprovalStatus,
    approval_id: str = "apr-1",
    invoice_id: str = "inv-1",
    approver_id: str = "sup-1",
) -> Approval:
    """Helper to rebuild an APPROVED or REJECTED Approval (no events)."""
    return Approval.reconstitute(
        id=approval_id,
        invoice_id=invoice_id,
        approver_id=approver_id,
        status=status,
        started_at=FIXED_TIME,
        completed_at=FIXED_TIME,
        rejection_reason="Budget exceeded" if status is ApprovalStatus.REJECTED else None,
    )


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: API tests through the FastAPI TestClient")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
