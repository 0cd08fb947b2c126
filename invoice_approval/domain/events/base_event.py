"""Base domain event class.

Domain events record "things that happened" in the invoice workflow and are
always named in past tense (InvoiceSubmitted, InvoiceApproved).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (time-ordered UUID) for tracking
    - occurred_at timestamp (UTC) for ordering
    - Payloads carry primitive values only, never aggregates

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    >>> class InvoiceApproved(DomainEvent):
    ...     approval_id: str
    ...     invoice_id: str
    ...     approver_id: str
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming
        3. Be frozen dataclasses with kw_only=True
        4. Include every value a subscriber needs (no lookups required)

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUIDv7 if not provided.
        occurred_at: When the fact occurred (UTC). Auto-generated if not
            provided; aggregates pass their own timestamp so the event and
            the aggregate state agree.
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """Event class name, used as the structured log event type."""
        return type(self).__name__
