"""Base model and mixins for all database tables.

This module provides:
- BaseModel: Base class for ALL models (provides id, created_at)
- TimestampMixin: Adds updated_at
- BaseMutableModel: Base for tables whose rows are updated

Following hexagonal architecture, domain aggregates never inherit from these
classes; repositories map between the two.

Architecture:
    BaseModel (id, created_at)
        ↑
        └── BaseMutableModel (+ updated_at via TimestampMixin)
            ├── InvoiceModel
            └── ApprovalModel

Identifiers are stored as strings: the domain treats them as opaque values
and mints time-ordered UUIDs in canonical text form.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Room for canonical UUIDs and externally supplied identifiers
ID_LENGTH = 64


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
    - id: String primary key (assigned by the domain, never by the database)
    - created_at: Row creation timestamp (UTC)
    """

    __abstract__ = True

    id: Mapped[str] = mapped_column(
        String(ID_LENGTH),
        primary_key=True,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: String showing class name and ID.
        """
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging).

        Returns:
            dict: Dictionary representation of the model.
        """
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Mixin for mutable models that track updates."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def to_dict(self) -> dict[str, Any]:
        """Extend BaseModel.to_dict() to include updated_at."""
        result: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        result["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return result


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base for models whose rows are updated after insert.

    Provides id, created_at and updated_at.
    """

    __abstract__ = True
