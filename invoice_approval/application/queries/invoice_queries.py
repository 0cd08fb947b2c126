"""Invoice queries (CQRS read operations).

Queries are immutable requests for data and never change state.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetInvoice:
    """Get a single invoice by ID.

    Attributes:
        invoice_id: Invoice identifier.

    Example:
        >>> query = GetInvoice(invoice_id="0192f1c0-...")
        >>> result = await handler.handle(query)
    """

    invoice_id: str
