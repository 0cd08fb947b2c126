"""Create invoices and approvals tables

Revision ID: 6f1c2a9d4b7e
Revises:
Create Date: 2024-10-15 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "6f1c2a9d4b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "invoices",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column(
            "invoice_number",
            sa.String(length=20),
            nullable=False,
            comment="Business invoice number (INV-YYYY-XXXX)",
        ),
        sa.Column(
            "amount",
            sa.Numeric(precision=15, scale=2),
            nullable=False,
            comment="Invoice amount, always positive",
        ),
        sa.Column(
            "submitter_id",
            sa.String(length=64),
            nullable=False,
            comment="User who submitted the invoice",
        ),
        sa.Column(
            "supervisor_id",
            sa.String(length=64),
            nullable=False,
            comment="Supervisor who approves the invoice",
        ),
        sa.Column(
            "submitted_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="When the invoice was submitted",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("invoice_number"),
    )
    op.create_index("idx_invoices_submitted_at", "invoices", ["submitted_at"])
    op.create_index("ix_invoices_submitter_id", "invoices", ["submitter_id"])
    op.create_index("ix_invoices_supervisor_id", "invoices", ["supervisor_id"])

    op.create_table(
        "approvals",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column(
            "invoice_id",
            sa.String(length=64),
            nullable=False,
            comment="Invoice under review",
        ),
        sa.Column(
            "approver_id",
            sa.String(length=64),
            nullable=False,
            comment="User who decides",
        ),
        sa.Column(
            "status",
            sa.String(length=20),
            server_default="pending",
            nullable=False,
            comment="pending, approved or rejected",
        ),
        sa.Column(
            "rejection_reason",
            sa.Text(),
            nullable=True,
            comment="Reason given on rejection",
        ),
        sa.Column(
            "started_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="When the approval process started",
        ),
        sa.Column(
            "completed_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="When the decision was made",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_approvals_invoice_started", "approvals", ["invoice_id", "started_at"]
    )
    op.create_index("ix_approvals_invoice_id", "approvals", ["invoice_id"])
    op.create_index("ix_approvals_approver_id", "approvals", ["approver_id"])
    op.create_index("ix_approvals_status", "approvals", ["status"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_approvals_status", table_name="approvals")
    op.drop_index("ix_approvals_approver_id", table_name="approvals")
    op.drop_index("ix_approvals_invoice_id", table_name="approvals")
    op.drop_index("idx_approvals_invoice_started", table_name="approvals")
    op.drop_table("approvals")

    op.drop_index("ix_invoices_supervisor_id", table_name="invoices")
    op.drop_index("ix_invoices_submitter_id", table_name="invoices")
    op.drop_index("idx_invoices_submitted_at", table_name="invoices")
    op.drop_table("invoices")
