"""Integration tests for SubmitInvoiceHandler on the SQL repository.

Tests cover:
- Concurrent submits of one number: exactly one stored, the other refused
  with DUPLICATE_INVOICE_NUMBER instead of a database error
- Unique constraint mapped to DUPLICATE_INVOICE_NUMBER when the
  uniqueness check has already passed
- Amounts that cannot be stored at cent precision refused before any write

Architecture:
- Real SQLAlchemy InvoiceRepository on SQLite
- Event bus is an AsyncMock (no approval policy involved)
"""

import asyncio
from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import func, select

from invoice_approval.application.commands.handlers import SubmitInvoiceHandler
from invoice_approval.application.commands.invoice_commands import SubmitInvoice
from invoice_approval.core.enums import ErrorCode
from invoice_approval.core.result import Failure, Success
from invoice_approval.domain.protocols.event_bus_protocol import EventBusProtocol
from invoice_approval.infrastructure.persistence.models.invoice import InvoiceModel


def _command(amount: Decimal = Decimal("1500.50")) -> SubmitInvoice:
    return SubmitInvoice(
        invoice_number="INV-2024-0001",
        amount=amount,
        submitter_id="user-1",
        supervisor_id="sup-1",
    )


async def _stored_invoices(database) -> int:
    async with database.get_session() as session:
        return await session.scalar(select(func.count()).select_from(InvoiceModel))


@pytest.fixture
def event_bus() -> AsyncMock:
    return AsyncMock(spec=EventBusProtocol)


@pytest.fixture
def handler(invoice_repo, event_bus) -> SubmitInvoiceHandler:
    return SubmitInvoiceHandler(invoice_repo=invoice_repo, event_bus=event_bus)


@pytest.mark.integration
class TestSubmitInvoiceDuplicateRace:
    """Test duplicate numbers under concurrency."""

    async def test_concurrent_submits_store_one_invoice(
        self, handler, event_bus, test_database
    ):
        """Test two simultaneous submits of one number yield one success."""
        # Act
        results = await asyncio.gather(
            handler.handle(_command()),
            handler.handle(_command(amount=Decimal("20.00"))),
        )

        # Assert
        successes = [r for r in results if isinstance(r, Success)]
        failures = [r for r in results if isinstance(r, Failure)]
        assert len(successes) == 1
        assert len(failures) == 1
        assert failures[0].error.code == ErrorCode.DUPLICATE_INVOICE_NUMBER
        assert await _stored_invoices(test_database) == 1
        event_bus.publish.assert_awaited_once()

    async def test_unique_constraint_after_passed_check_is_duplicate(
        self, handler, invoice_repo, event_bus, test_database
    ):
        """Test a number taken between check and insert fails as a duplicate."""
        # Arrange
        await handler.handle(_command())
        event_bus.publish.reset_mock()

        # Act: the uniqueness check saw the number as free
        with patch.object(
            invoice_repo, "exists_by_number", AsyncMock(return_value=False)
        ):
            result = await handler.handle(_command(amount=Decimal("20.00")))

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.DUPLICATE_INVOICE_NUMBER
        assert result.error.message == (
            "An invoice with number INV-2024-0001 already exists."
        )
        assert await _stored_invoices(test_database) == 1
        event_bus.publish.assert_not_awaited()


@pytest.mark.integration
class TestSubmitInvoiceAmountBounds:
    """Test amounts the invoices table cannot hold."""

    @pytest.mark.parametrize(
        "amount",
        [
            Decimal("0.001"),
            Decimal("0.004"),
            Decimal("1E+13"),
            Decimal("9999999999999.995"),
        ],
    )
    async def test_unstorable_amount_is_invalid(
        self, handler, event_bus, test_database, amount
    ):
        """Test sub-cent and oversized amounts are refused before any write."""
        result = await handler.handle(_command(amount=amount))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_AMOUNT
        assert await _stored_invoices(test_database) == 0
        event_bus.publish.assert_not_awaited()
