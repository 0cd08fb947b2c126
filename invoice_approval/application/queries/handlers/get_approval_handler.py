"""Approval query handlers.

Two read paths over ApprovalRepository: by approval id and by invoice id.
Both return the same ApprovalResult DTO.
"""

from dataclasses import dataclass
from datetime import datetime

from invoice_approval.application.queries.approval_queries import (
    GetApproval,
    GetApprovalByInvoice,
)
from invoice_approval.core.errors import DomainError
from invoice_approval.core.result import Failure, Result, Success
from invoice_approval.domain.entities.approval import Approval
from invoice_approval.domain.errors import InvalidApprovalError
from invoice_approval.domain.protocols.approval_repository import ApprovalRepository
from invoice_approval.domain.value_objects import ApprovalId, InvoiceId


@dataclass
class ApprovalResult:
    """Approval query result."""

    id: str
    invoice_id: str
    approver_id: str
    status: str
    started_at: datetime
    completed_at: datetime | None
    rejection_reason: str | None

    @classmethod
    def from_entity(cls, approval: Approval) -> "ApprovalResult":
        return cls(
            id=str(approval.id),
            invoice_id=str(approval.invoice_id),
            approver_id=str(approval.approver_id),
            status=approval.status.value,
            started_at=approval.started_at,
            completed_at=approval.completed_at,
            rejection_reason=approval.rejection_reason,
        )


class GetApprovalHandler:
    """Handler for getting an approval by its ID."""

    def __init__(self, approval_repo: ApprovalRepository) -> None:
        self._approval_repo = approval_repo

    async def handle(self, query: GetApproval) -> Result[ApprovalResult, DomainError]:
        """Handle get approval query.

        Returns:
            Success(ApprovalResult) with approval data.
            Failure(InvalidApprovalError) if the id is empty or unknown.
        """
        id_result = ApprovalId.create(query.approval_id)
        if isinstance(id_result, Failure):
            return id_result

        approval = await self._approval_repo.find_by_id(id_result.value)
        if approval is None:
            return Failure(error=InvalidApprovalError.not_found(query.approval_id))

        return Success(value=ApprovalResult.from_entity(approval))


class GetApprovalByInvoiceHandler:
    """Handler for getting the approval process of an invoice."""

    def __init__(self, approval_repo: ApprovalRepository) -> None:
        self._approval_repo = approval_repo

    async def handle(
        self, query: GetApprovalByInvoice
    ) -> Result[ApprovalResult, DomainError]:
        """Handle get approval by invoice query.

        Returns:
            Success(ApprovalResult) for the latest approval of the invoice.
            Failure(InvalidApprovalError) if the id is empty or the invoice
                has no approval process.
        """
        id_result = InvoiceId.create(query.invoice_id)
        if isinstance(id_result, Failure):
            return id_result

        approval = await self._approval_repo.find_by_invoice_id(id_result.value)
        if approval is None:
            return Failure(
                error=InvalidApprovalError.not_found_for_invoice(query.invoice_id)
            )

        return Success(value=ApprovalResult.from_entity(approval))
