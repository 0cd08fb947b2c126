"""Invoice request and response schemas.

Request fields are deliberately loose (plain strings, unconstrained
decimal): business validation belongs to the domain and comes back as
400 Problem Details. Only malformed JSON or a non-numeric amount is
rejected by pydantic (422).
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from invoice_approval.application.queries.handlers.get_invoice_handler import (
    InvoiceResult,
)
from invoice_approval.domain.entities.invoice import Invoice


# =============================================================================
# Submit Invoice
# =============================================================================


class InvoiceCreateRequest(BaseModel):
    """Request schema for submitting an invoice.

    POST /api/v1/invoices
    Returns: 201 Created
    """

    invoice_number: str = Field(
        ...,
        description="Invoice number in format INV-YYYY-XXXX",
        examples=["INV-2024-0001"],
    )
    amount: Decimal = Field(
        ...,
        description="Invoice amount, greater than zero",
        examples=["1500.50"],
    )
    submitter_id: str = Field(..., description="Submitting user")
    supervisor_id: str = Field(..., description="Supervisor who must approve")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "invoice_number": "INV-2024-0001",
                "amount": "1500.50",
                "submitter_id": "user-1",
                "supervisor_id": "sup-1",
            }
        }
    )


class InvoiceCreateResponse(BaseModel):
    """Response schema for a submitted invoice."""

    invoice_id: str = Field(..., description="Invoice unique identifier")
    invoice_number: str = Field(..., description="Invoice number")
    amount: Decimal = Field(..., description="Invoice amount (cents precision)")
    status: str = Field(default="submitted", description="Submission status")
    message: str = Field(
        default="Invoice submitted successfully. Approval process started.",
        description="Human-readable outcome",
    )

    @classmethod
    def from_entity(cls, invoice: Invoice) -> "InvoiceCreateResponse":
        """Build response from the submitted aggregate."""
        return cls(
            invoice_id=str(invoice.id),
            invoice_number=str(invoice.number),
            amount=invoice.amount.to_cents(),
        )


# =============================================================================
# Get Invoice
# =============================================================================


class InvoiceResponse(BaseModel):
    """Single invoice response.

    GET /api/v1/invoices/{id}
    Returns: 200 OK
    """

    id: str = Field(..., description="Invoice unique identifier")
    invoice_number: str = Field(..., description="Invoice number")
    amount: Decimal = Field(..., description="Invoice amount")
    submitter_id: str = Field(..., description="Submitting user")
    supervisor_id: str = Field(..., description="Approving supervisor")
    submitted_at: datetime = Field(..., description="Submission timestamp (UTC)")

    @classmethod
    def from_dto(cls, dto: InvoiceResult) -> "InvoiceResponse":
        """Convert query DTO to response schema."""
        return cls(
            id=dto.id,
            invoice_number=dto.invoice_number,
            amount=dto.amount,
            submitter_id=dto.submitter_id,
            supervisor_id=dto.supervisor_id,
            submitted_at=dto.submitted_at,
        )
