"""Database models.

Importing this package registers every table on BaseModel.metadata.
"""

from invoice_approval.infrastructure.persistence.models.approval import ApprovalModel
from invoice_approval.infrastructure.persistence.models.invoice import InvoiceModel

__all__ = ["ApprovalModel", "InvoiceModel"]
