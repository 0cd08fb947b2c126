"""Approval aggregate.

Tracks the decision on one invoice. An approval starts in PENDING and moves
exactly once to APPROVED or REJECTED. The approval refers to its invoice by
identifier only; it never holds the Invoice aggregate.

State Machine:
    start()  → PENDING           (records ApprovalProcessStarted)
    approve(): PENDING → APPROVED (records InvoiceApproved)
    reject():  PENDING → REJECTED (records InvoiceRejected)

Any transition out of a terminal state fails with an InvalidApprovalError
and leaves the aggregate untouched.

Usage:
    match approval.approve():
        case Success():
            await approval_repo.save(approval)
        case Failure(error=error):
            return Failure(error=error)
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Self, assert_never

from invoice_approval.core.result import Failure, Result, Success
from invoice_approval.domain.entities.aggregate_root import AggregateRoot
from invoice_approval.domain.enums.approval_status import ApprovalStatus
from invoice_approval.domain.errors import InvalidApprovalError
from invoice_approval.domain.events.approval_events import (
    ApprovalProcessStarted,
    InvoiceApproved,
    InvoiceRejected,
)
from invoice_approval.domain.value_objects import ApprovalId, ApproverId, InvoiceId


@dataclass
class Approval(AggregateRoot):
    """Approval process for a single invoice.

    Attributes:
        id: Approval identifier.
        invoice_id: Invoice under review (reference by identity).
        approver_id: User expected to decide.
        status: Current lifecycle state.
        started_at: When the process was opened (UTC).
        completed_at: When a terminal state was entered; None while PENDING.
        rejection_reason: Reason given on rejection; None unless REJECTED.

    Invariants (checked on construction):
        - completed_at is set iff status is terminal
        - rejection_reason is set iff status is REJECTED
    """

    id: ApprovalId
    invoice_id: InvoiceId
    approver_id: ApproverId
    status: ApprovalStatus
    started_at: datetime
    completed_at: datetime | None = None
    rejection_reason: str | None = None

    def __post_init__(self) -> None:
        """Validate lifecycle invariants.

        Raises:
            ValueError: If timestamps or reason disagree with status.
        """
        if self.status.is_complete() != (self.completed_at is not None):
            raise ValueError(
                f"completed_at must be set exactly when status is terminal "
                f"(status={self.status.value})"
            )
        if (self.status is ApprovalStatus.REJECTED) != (
            self.rejection_reason is not None
        ):
            raise ValueError(
                f"rejection_reason must be set exactly when status is rejected "
                f"(status={self.status.value})"
            )

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def start(
        cls,
        *,
        id: ApprovalId,
        invoice_id: str,
        approver_id: ApproverId,
        started_at: datetime | None = None,
    ) -> Result[Self, InvalidApprovalError]:
        """Open a PENDING approval process for an invoice.

        Args:
            id: Identifier minted by the approval repository.
            invoice_id: Invoice to decide on.
            approver_id: Validated approver.
            started_at: Start time; defaults to now (UTC).

        Returns:
            Success(Approval) with ApprovalProcessStarted recorded.
            Failure(InvalidApprovalError) if invoice_id is empty.
        """
        try:
            invoice = InvoiceId(invoice_id)
        except ValueError:
            return Failure(error=InvalidApprovalError.empty_invoice_id())

        now = started_at or datetime.now(UTC)
        approval = cls(
            id=id,
            invoice_id=invoice,
            approver_id=approver_id,
            status=ApprovalStatus.PENDING,
            started_at=now,
        )
        approval._record_event(
            ApprovalProcessStarted(
                occurred_at=now,
                approval_id=str(approval.id),
                invoice_id=str(approval.invoice_id),
                approver_id=str(approval.approver_id),
            )
        )
        return Success(value=approval)

    @classmethod
    def reconstitute(
        cls,
        *,
        id: str,
        invoice_id: str,
        approver_id: str,
        status: ApprovalStatus | str,
        started_at: datetime,
        completed_at: datetime | None = None,
        rejection_reason: str | None = None,
    ) -> Self:
        """Rebuild a stored approval without recording events.

        Raises:
            ValueError: If stored data violates an invariant.
        """
        return cls(
            id=ApprovalId(id),
            invoice_id=InvoiceId(invoice_id),
            approver_id=ApproverId(approver_id),
            status=ApprovalStatus(status),
            started_at=started_at,
            completed_at=completed_at,
            rejection_reason=rejection_reason,
        )

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def approve(self) -> Result[None, InvalidApprovalError]:
        """Approve the invoice.

        Returns:
            Success(None): Now APPROVED, InvoiceApproved recorded.
            Failure(InvalidApprovalError): Already approved or rejected.
        """
        error = self._ensure_pending()
        if error is not None:
            return Failure(error=error)

        now = datetime.now(UTC)
        self.status = ApprovalStatus.APPROVED
        self.completed_at = now
        self._record_event(
            InvoiceApproved(
                occurred_at=now,
                approval_id=str(self.id),
                invoice_id=str(self.invoice_id),
                approver_id=str(self.approver_id),
            )
        )
        return Success(value=None)

    def reject(self, reason: str) -> Result[None, InvalidApprovalError]:
        """Reject the invoice.

        The reason is stored as given; length rules live at the boundary.

        Args:
            reason: Why the invoice was rejected.

        Returns:
            Success(None): Now REJECTED, InvoiceRejected recorded.
            Failure(InvalidApprovalError): Already approved or rejected.
        """
        error = self._ensure_pending()
        if error is not None:
            return Failure(error=error)

        now = datetime.now(UTC)
        self.status = ApprovalStatus.REJECTED
        self.completed_at = now
        self.rejection_reason = reason
        self._record_event(
            InvoiceRejected(
                occurred_at=now,
                approval_id=str(self.id),
                invoice_id=str(self.invoice_id),
                approver_id=str(self.approver_id),
                reason=reason,
            )
        )
        return Success(value=None)

    def _ensure_pending(self) -> InvalidApprovalError | None:
        """Transition guard, exhaustive over ApprovalStatus."""
        match self.status:
            case ApprovalStatus.PENDING:
                return None
            case ApprovalStatus.APPROVED:
                return InvalidApprovalError.already_approved()
            case ApprovalStatus.REJECTED:
                return InvalidApprovalError.already_rejected()
            case _:
                assert_never(self.status)

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    def is_pending(self) -> bool:
        return self.status.is_pending()

    def is_approved(self) -> bool:
        return self.status is ApprovalStatus.APPROVED

    def is_rejected(self) -> bool:
        return self.status is ApprovalStatus.REJECTED
