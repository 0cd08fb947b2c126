"""InvoiceRepository - SQLAlchemy implementation.

Adapter for hexagonal architecture.
Maps between domain Invoice aggregates and InvoiceModel rows.
"""

from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from invoice_approval.domain.entities.invoice import Invoice
from invoice_approval.domain.errors import DuplicateInvoiceNumberError
from invoice_approval.domain.value_objects import InvoiceId, InvoiceNumber
from invoice_approval.infrastructure.persistence.database import Database
from invoice_approval.infrastructure.persistence.models.invoice import InvoiceModel


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops the offset)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class InvoiceRepository:
    """SQLAlchemy implementation of the InvoiceRepository protocol.

    Opens one session per operation from the shared Database, so save()
    has committed by the time it returns.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Example:
        >>> repo = InvoiceRepository(database=get_database())
        >>> invoice = await repo.find_by_id(InvoiceId("..."))
    """

    def __init__(self, database: Database) -> None:
        """Initialize repository with database.

        Args:
            database: Database providing sessions.
        """
        self._database = database

    def next_identity(self) -> InvoiceId:
        return InvoiceId(str(uuid7()))

    async def save(self, invoice: Invoice) -> None:
        """Create or update invoice in database.

        Args:
            invoice: Invoice aggregate to persist.

        Raises:
            DuplicateInvoiceNumberError: The unique constraint on
                invoice_number rejected the write (a concurrent submit took
                the number after the uniqueness check).
        """
        try:
            async with self._database.get_session() as session:
                existing = await session.get(InvoiceModel, str(invoice.id))

                if existing is None:
                    session.add(self._to_model(invoice))
                    return

                existing.invoice_number = str(invoice.number)
                existing.amount = invoice.amount.to_cents()
                existing.submitter_id = str(invoice.submitter_id)
                existing.supervisor_id = str(invoice.supervisor_id)
                existing.submitted_at = invoice.submitted_at
        except IntegrityError as e:
            raise DuplicateInvoiceNumberError(str(invoice.number)) from e

    async def find_by_id(self, invoice_id: InvoiceId) -> Invoice | None:
        """Find invoice by ID.

        Args:
            invoice_id: Invoice identifier.

        Returns:
            Domain Invoice if found, None otherwise.
        """
        async with self._database.get_session() as session:
            stmt = select(InvoiceModel).where(InvoiceModel.id == str(invoice_id))
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def exists_by_number(self, number: InvoiceNumber) -> bool:
        """Check if an invoice number is already taken.

        Args:
            number: Invoice number to check.

        Returns:
            True if a row with this number exists.
        """
        async with self._database.get_session() as session:
            stmt = (
                select(InvoiceModel.id)
                .where(InvoiceModel.invoice_number == str(number))
                .limit(1)
            )
            result = await session.execute(stmt)
            return result.scalar_one_or_none() is not None

    def _to_domain(self, model: InvoiceModel) -> Invoice:
        """Convert database model to domain aggregate."""
        return Invoice.reconstitute(
            id=model.id,
            number=model.invoice_number,
            amount=model.amount,
            submitter_id=model.submitter_id,
            supervisor_id=model.supervisor_id,
            submitted_at=as_utc(model.submitted_at),
        )

    def _to_model(self, invoice: Invoice) -> InvoiceModel:
        """Convert domain aggregate to a new database model."""
        return InvoiceModel(
            id=str(invoice.id),
            invoice_number=str(invoice.number),
            amount=invoice.amount.to_cents(),
            submitter_id=str(invoice.submitter_id),
            supervisor_id=str(invoice.supervisor_id),
            submitted_at=invoice.submitted_at,
        )
