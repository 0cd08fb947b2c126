"""Invoice number value object.

Invoice numbers follow the INV-YYYY-XXXX layout: the literal prefix "INV",
a four-digit year and a four-digit sequence (e.g. "INV-2024-0001").
"""

import re
from dataclasses import dataclass
from typing import Self

from invoice_approval.core.result import Failure, Result, Success
from invoice_approval.domain.errors import InvalidInvoiceError

INVOICE_NUMBER_PATTERN = re.compile(r"^INV-[0-9]{4}-[0-9]{4}$")


@dataclass(frozen=True)
class InvoiceNumber:
    """Validated invoice number.

    Attributes:
        value: Invoice number string matching INV-YYYY-XXXX.

    Raises:
        ValueError: If the value does not match the required layout.

    Example:
        >>> InvoiceNumber("INV-2024-0001")
        InvoiceNumber('INV-2024-0001')
        >>> InvoiceNumber("INV-24-1")
        Traceback (most recent call last):
        ...
        ValueError: Invoice number must be in format INV-YYYY-XXXX. Given: INV-24-1
    """

    value: str

    def __post_init__(self) -> None:
        """Validate the invoice number layout.

        Raises:
            ValueError: If value is not a string matching INV-YYYY-XXXX.
        """
        if not isinstance(self.value, str) or not INVOICE_NUMBER_PATTERN.fullmatch(
            self.value
        ):
            raise ValueError(
                InvalidInvoiceError.invalid_number_format(str(self.value)).message
            )

    @classmethod
    def create(cls, value: str) -> Result[Self, InvalidInvoiceError]:
        """Build an invoice number, returning a Failure instead of raising.

        Args:
            value: Raw invoice number.

        Returns:
            Success(InvoiceNumber) or Failure(InvalidInvoiceError).
        """
        try:
            return Success(value=cls(value))
        except ValueError:
            return Failure(error=InvalidInvoiceError.invalid_number_format(str(value)))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"InvoiceNumber('{self.value}')"
