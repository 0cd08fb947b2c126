"""Invoice amount value object with Decimal precision.

Amounts are strictly positive decimals that fit the stored numeric(15,2)
column: at least one cent after half-up rounding, and below 10^13. Floats
are converted through their string form so that 1500.5 becomes
Decimal("1500.5") rather than the binary approximation.

Equality:
    Two amounts are equal when they differ by less than 0.0001. This
    tolerance makes equality non-transitive, so Amount is not hashable.

Usage:
    from invoice_approval.domain.value_objects import Amount

    amount = Amount(Decimal("1500.50"))
    str(amount)  # "1500.50"
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Self

from invoice_approval.core.result import Failure, Result, Success
from invoice_approval.domain.errors import InvalidInvoiceError

EQUALITY_TOLERANCE = Decimal("0.0001")
# numeric(15,2) holds 13 integer digits
MAX_AMOUNT = Decimal("10000000000000")
_CENTS = Decimal("0.01")


class InvalidAmountValue(ValueError):
    """ValueError carrying the domain error that explains it."""

    def __init__(self, error: InvalidInvoiceError) -> None:
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True, eq=False)
class Amount:
    """Positive monetary amount.

    Attributes:
        value: Decimal amount, always at least 0.005 and below MAX_AMOUNT.

    Raises:
        ValueError: If the value is not a finite number, rounds to zero
            cents, or does not fit numeric(15,2).

    Example:
        >>> Amount(Decimal("1500.50")) == Amount(1500.50001)
        True
        >>> Amount(0)
        Traceback (most recent call last):
        ...
        InvalidAmountValue: Invoice amount must be greater than zero. Given: 0
    """

    value: Decimal

    def __post_init__(self) -> None:
        """Convert to Decimal and validate.

        Raises:
            InvalidAmountValue: If value is not numeric, is NaN/Infinite,
                is not positive at cent precision, or is too large.
        """
        if isinstance(self.value, bool):
            raise InvalidAmountValue(InvalidInvoiceError.invalid_amount(self.value))

        if not isinstance(self.value, Decimal):
            try:
                object.__setattr__(self, "value", Decimal(str(self.value).strip()))
            except (InvalidOperation, TypeError, ValueError) as e:
                raise InvalidAmountValue(
                    InvalidInvoiceError.invalid_amount(self.value)
                ) from e

        if self.value.is_nan() or self.value.is_infinite() or self.value <= 0:
            raise InvalidAmountValue(InvalidInvoiceError.invalid_amount(self.value))

        # Checked before quantize, which fails on very large exponents
        if self.value >= MAX_AMOUNT or self.to_cents() >= MAX_AMOUNT:
            raise InvalidAmountValue(
                InvalidInvoiceError.amount_too_large(self.value, MAX_AMOUNT)
            )

        if self.to_cents() <= 0:
            raise InvalidAmountValue(InvalidInvoiceError.invalid_amount(self.value))

    @classmethod
    def create(cls, value: Decimal | int | float | str) -> Result[Self, InvalidInvoiceError]:
        """Build an amount, returning a Failure instead of raising.

        Args:
            value: Raw amount (Decimal, int, float or numeric string).

        Returns:
            Success(Amount) or Failure(InvalidInvoiceError).
        """
        try:
            return Success(value=cls(value))  # type: ignore[arg-type]
        except InvalidAmountValue as e:
            return Failure(error=e.error)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return abs(self.value - other.value) < EQUALITY_TOLERANCE

    __hash__ = None  # type: ignore[assignment]

    def to_cents(self) -> Decimal:
        """Amount rounded half-up to two decimal places."""
        return self.value.quantize(_CENTS, rounding=ROUND_HALF_UP)

    def __str__(self) -> str:
        return f"{self.to_cents():f}"

    def __repr__(self) -> str:
        return f"Amount({self.value!r})"
