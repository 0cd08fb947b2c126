"""ApprovalRepository - SQLAlchemy implementation.

Adapter for hexagonal architecture.
Maps between domain Approval aggregates and ApprovalModel rows.

Updates are conditional: an existing row is only written while its stored
status is still pending. Two approvers racing on the same approval both
load PENDING, but only the first UPDATE matches; the second raises
ApprovalConcurrencyError.
"""

from typing import cast

from sqlalchemy import CursorResult, select, update
from uuid_extensions import uuid7

from invoice_approval.domain.entities.approval import Approval
from invoice_approval.domain.enums.approval_status import ApprovalStatus
from invoice_approval.domain.errors import ApprovalConcurrencyError
from invoice_approval.domain.value_objects import ApprovalId, InvoiceId
from invoice_approval.infrastructure.persistence.database import Database
from invoice_approval.infrastructure.persistence.models.approval import ApprovalModel
from invoice_approval.infrastructure.persistence.repositories.invoice_repository import (
    as_utc,
)


class ApprovalRepository:
    """SQLAlchemy implementation of the ApprovalRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Example:
        >>> repo = ApprovalRepository(database=get_database())
        >>> approval = await repo.find_by_invoice_id(InvoiceId("..."))
    """

    def __init__(self, database: Database) -> None:
        """Initialize repository with database.

        Args:
            database: Database providing sessions.
        """
        self._database = database

    def next_identity(self) -> ApprovalId:
        return ApprovalId(str(uuid7()))

    async def save(self, approval: Approval) -> None:
        """Insert a new approval or conditionally update an existing one.

        Args:
            approval: Approval aggregate to persist.

        Raises:
            ApprovalConcurrencyError: Stored row is no longer pending.
        """
        async with self._database.get_session() as session:
            existing = await session.get(ApprovalModel, str(approval.id))

            if existing is None:
                session.add(self._to_model(approval))
                return

            stmt = (
                update(ApprovalModel)
                .where(
                    ApprovalModel.id == str(approval.id),
                    ApprovalModel.status == ApprovalStatus.PENDING.value,
                )
                .values(
                    approver_id=str(approval.approver_id),
                    status=approval.status.value,
                    rejection_reason=approval.rejection_reason,
                    completed_at=approval.completed_at,
                )
                .execution_options(synchronize_session=False)
            )
            result = cast(CursorResult, await session.execute(stmt))

            if result.rowcount == 0:
                raise ApprovalConcurrencyError(str(approval.id))

    async def find_by_id(self, approval_id: ApprovalId) -> Approval | None:
        """Find approval by ID.

        Args:
            approval_id: Approval identifier.

        Returns:
            Domain Approval if found, None otherwise.
        """
        async with self._database.get_session() as session:
            stmt = select(ApprovalModel).where(ApprovalModel.id == str(approval_id))
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_by_invoice_id(self, invoice_id: InvoiceId) -> Approval | None:
        """Find the most recently started approval for an invoice.

        Args:
            invoice_id: Invoice identifier.

        Returns:
            Domain Approval if found, None otherwise.
        """
        async with self._database.get_session() as session:
            stmt = (
                select(ApprovalModel)
                .where(ApprovalModel.invoice_id == str(invoice_id))
                .order_by(ApprovalModel.started_at.desc())
                .limit(1)
            )
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    def _to_domain(self, model: ApprovalModel) -> Approval:
        """Convert database model to domain aggregate."""
        return Approval.reconstitute(
            id=model.id,
            invoice_id=model.invoice_id,
            approver_id=model.approver_id,
            status=ApprovalStatus(model.status),
            started_at=as_utc(model.started_at),
            completed_at=as_utc(model.completed_at) if model.completed_at else None,
            rejection_reason=model.rejection_reason,
        )

    def _to_model(self, approval: Approval) -> ApprovalModel:
        """Convert domain aggregate to a new database model."""
        return ApprovalModel(
            id=str(approval.id),
            invoice_id=str(approval.invoice_id),
            approver_id=str(approval.approver_id),
            status=approval.status.value,
            rejection_reason=approval.rejection_reason,
            started_at=approval.started_at,
            completed_at=approval.completed_at,
        )
