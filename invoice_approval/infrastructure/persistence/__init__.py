"""Persistence layer (SQLAlchemy).

Usage:
    from invoice_approval.infrastructure.persistence import BaseModel, Database
"""

from invoice_approval.infrastructure.persistence.base import (
    BaseModel,
    BaseMutableModel,
    TimestampMixin,
)
from invoice_approval.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "BaseMutableModel", "Database", "TimestampMixin"]
