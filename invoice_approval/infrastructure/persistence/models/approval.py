"""Approval database model.

Stores one row per approval process. The row is inserted in PENDING and
updated exactly once when the approver decides.
"""

from datetime import datetime

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from invoice_approval.infrastructure.persistence.base import ID_LENGTH, BaseMutableModel


class ApprovalModel(BaseMutableModel):
    """Approval table.

    Fields:
        id: Approval identifier (from BaseModel)
        created_at / updated_at: Row bookkeeping (from BaseMutableModel)
        invoice_id: Invoice under review (no foreign key; aggregates
            reference each other by identity only)
        approver_id: Deciding user
        status: pending, approved or rejected
        rejection_reason: Set only when rejected
        started_at: When the process started
        completed_at: When the decision was made
    """

    __tablename__ = "approvals"

    invoice_id: Mapped[str] = mapped_column(
        String(ID_LENGTH),
        nullable=False,
        index=True,
        comment="Invoice under review",
    )
    approver_id: Mapped[str] = mapped_column(
        String(ID_LENGTH),
        nullable=False,
        index=True,
        comment="User who decides",
    )
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="pending",
        server_default="pending",
        index=True,
        comment="pending, approved or rejected",
    )
    rejection_reason: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Reason given on rejection",
    )
    started_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="When the approval process started",
    )
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="When the decision was made",
    )

    __table_args__ = (Index("idx_approvals_invoice_started", "invoice_id", "started_at"),)
