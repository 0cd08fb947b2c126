"""Approval request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from invoice_approval.application.queries.handlers.get_approval_handler import (
    ApprovalResult,
)
from invoice_approval.core.config import settings
from invoice_approval.domain.entities.approval import Approval


# =============================================================================
# Approve / Reject
# =============================================================================


class ApprovalRejectRequest(BaseModel):
    """Request schema for rejecting an invoice.

    PUT /api/v1/approvals/{id}/reject
    Returns: 200 OK

    The reason is stripped before the length check, so whitespace alone
    never satisfies the minimum.
    """

    reason: str = Field(
        ...,
        min_length=settings.rejection_reason_min_length,
        max_length=settings.rejection_reason_max_length,
        description="Why the invoice is rejected",
        examples=["Budget exceeded"],
    )

    model_config = ConfigDict(str_strip_whitespace=True)


class ApprovalActionResponse(BaseModel):
    """Response schema for approve and reject."""

    approval_id: str = Field(..., description="Approval unique identifier")
    invoice_id: str = Field(..., description="Invoice under approval")
    status: str = Field(..., description="New approval status")
    reason: str | None = Field(default=None, description="Rejection reason")
    message: str = Field(..., description="Human-readable outcome")

    @classmethod
    def approved(cls, approval: Approval) -> "ApprovalActionResponse":
        return cls(
            approval_id=str(approval.id),
            invoice_id=str(approval.invoice_id),
            status=approval.status.value,
            message="Invoice approved successfully.",
        )

    @classmethod
    def rejected(cls, approval: Approval) -> "ApprovalActionResponse":
        return cls(
            approval_id=str(approval.id),
            invoice_id=str(approval.invoice_id),
            status=approval.status.value,
            reason=approval.rejection_reason,
            message="Invoice rejected.",
        )


# =============================================================================
# Get Approval
# =============================================================================


class ApprovalResponse(BaseModel):
    """Single approval response.

    GET /api/v1/approvals/{id}
    GET /api/v1/invoices/{id}/approval
    Returns: 200 OK
    """

    id: str = Field(..., description="Approval unique identifier")
    invoice_id: str = Field(..., description="Invoice under approval")
    approver_id: str = Field(..., description="User expected to decide")
    status: str = Field(..., description="pending, approved or rejected")
    started_at: datetime = Field(..., description="Process start (UTC)")
    completed_at: datetime | None = Field(
        default=None, description="Decision time (UTC), null while pending"
    )
    rejection_reason: str | None = Field(
        default=None, description="Reason, only when rejected"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "0192f1c0-7c4e-7b1a-9f7e-3b2d1c0a9e8f",
                "invoice_id": "0192f1c0-7c4d-7a55-8c1e-5f4d3c2b1a09",
                "approver_id": "sup-1",
                "status": "rejected",
                "started_at": "2024-01-15T10:30:00Z",
                "completed_at": "2024-01-15T14:45:00Z",
                "rejection_reason": "Budget exceeded",
            }
        }
    )

    @classmethod
    def from_dto(cls, dto: ApprovalResult) -> "ApprovalResponse":
        """Convert query DTO to response schema."""
        return cls(
            id=dto.id,
            invoice_id=dto.invoice_id,
            approver_id=dto.approver_id,
            status=dto.status,
            started_at=dto.started_at,
            completed_at=dto.completed_at,
            rejection_reason=dto.rejection_reason,
        )
