"""Invoice commands (CQRS write operations).

Commands represent user intent. They are immutable (frozen=True), use
keyword-only arguments and carry raw input; validation happens in the
domain.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, kw_only=True)
class SubmitInvoice:
    """Submit an invoice for approval.

    Submitting an invoice automatically starts its approval process with the
    supervisor as approver.

    Attributes:
        invoice_number: Business number (INV-YYYY-XXXX).
        amount: Invoice amount (> 0).
        submitter_id: Submitting user.
        supervisor_id: Supervisor who must approve.

    Example:
        >>> command = SubmitInvoice(
        ...     invoice_number="INV-2024-0001",
        ...     amount=Decimal("1500.50"),
        ...     submitter_id="user-1",
        ...     supervisor_id="sup-1",
        ... )
        >>> result = await handler.handle(command)
    """

    invoice_number: str
    amount: Decimal | int | float | str
    submitter_id: str
    supervisor_id: str
