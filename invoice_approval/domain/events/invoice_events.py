"""Invoice domain events.

Handlers:
- StartApprovalProcessPolicy: starts the approval process
- LoggingEventHandler: logs the submission
"""

from dataclasses import dataclass
from decimal import Decimal

from invoice_approval.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class InvoiceSubmitted(DomainEvent):
    """Invoice accepted for processing.

    Recorded exactly once per invoice, at submission. occurred_at equals the
    invoice's submitted_at.

    Triggers:
    - StartApprovalProcessPolicy: Start approval with supervisor as approver
    - LoggingEventHandler: Log submission

    Attributes:
        invoice_id: Submitted invoice.
        invoice_number: Business number (INV-YYYY-XXXX).
        amount: Invoice amount.
        submitter_id: User who submitted the invoice.
        supervisor_id: Supervisor who must resolve the approval.
    """

    invoice_id: str
    invoice_number: str
    amount: Decimal
    submitter_id: str
    supervisor_id: str
