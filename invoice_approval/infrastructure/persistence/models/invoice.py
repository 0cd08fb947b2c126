"""Invoice database model.

Stores submitted invoices. Rows are written once at submission.
Amounts are stored at cent precision (NUMERIC(15, 2)).
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from invoice_approval.infrastructure.persistence.base import ID_LENGTH, BaseMutableModel


class InvoiceModel(BaseMutableModel):
    """Invoice table.

    Fields:
        id: Invoice identifier (from BaseModel)
        created_at / updated_at: Row bookkeeping (from BaseMutableModel)
        invoice_number: INV-YYYY-XXXX, unique
        amount: Invoice amount
        submitter_id: Submitting user
        supervisor_id: Approving supervisor
        submitted_at: Submission timestamp
    """

    __tablename__ = "invoices"

    invoice_number: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        unique=True,
        comment="Business invoice number (INV-YYYY-XXXX)",
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(15, 2),
        nullable=False,
        comment="Invoice amount, always positive",
    )
    submitter_id: Mapped[str] = mapped_column(
        String(ID_LENGTH),
        nullable=False,
        index=True,
        comment="User who submitted the invoice",
    )
    supervisor_id: Mapped[str] = mapped_column(
        String(ID_LENGTH),
        nullable=False,
        index=True,
        comment="Supervisor who approves the invoice",
    )
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="When the invoice was submitted",
    )

    __table_args__ = (Index("idx_invoices_submitted_at", "submitted_at"),)
