"""Domain ports (protocols).

Usage:
    from invoice_approval.domain.protocols import InvoiceRepository, EventBusProtocol
"""

from invoice_approval.domain.protocols.approval_repository import ApprovalRepository
from invoice_approval.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from invoice_approval.domain.protocols.invoice_repository import InvoiceRepository
from invoice_approval.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "ApprovalRepository",
    "EventBusProtocol",
    "EventHandler",
    "InvoiceRepository",
    "LoggerProtocol",
]
