"""Unit tests for invoice value objects.

Tests cover:
- InvoiceNumber format validation (INV-YYYY-XXXX)
- Amount positivity, conversion, tolerance equality and cent rounding
- Amount bounds of numeric(15,2): at least one cent, below 10^13
- Identifier normalization and empty-value rejection ("", blank, "0")
- create() factories returning Result instead of raising

Architecture:
- Pure domain tests, no mocks
"""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from invoice_approval.core.enums import ErrorCode
from invoice_approval.core.result import Failure, Success
from invoice_approval.domain.value_objects import (
    Amount,
    ApprovalId,
    ApproverId,
    InvoiceId,
    InvoiceNumber,
    SubmitterId,
    SupervisorId,
)


@pytest.mark.unit
class TestInvoiceNumber:
    """Test InvoiceNumber validation."""

    @pytest.mark.parametrize("value", ["INV-2024-0001", "INV-1999-9999", "INV-0000-0000"])
    def test_accepts_valid_format(self, value):
        """Test numbers matching INV-YYYY-XXXX are accepted."""
        number = InvoiceNumber(value)

        assert number.value == value
        assert str(number) == value

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "INV-24-0001",
            "INV-2024-001",
            "inv-2024-0001",
            "INV-2024-00001",
            "INV_2024_0001",
            "XINV-2024-0001",
            "INV-2024-0001\n",
            "INV-ABCD-0001",
        ],
    )
    def test_rejects_invalid_format(self, value):
        """Test malformed numbers raise ValueError with the domain message."""
        with pytest.raises(ValueError, match="Invoice number must be in format"):
            InvoiceNumber(value)

    def test_create_returns_failure_for_invalid_format(self):
        """Test create() returns INVALID_INVOICE_NUMBER instead of raising."""
        result = InvoiceNumber.create("INV-24-1")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_INVOICE_NUMBER
        assert result.error.message == (
            "Invoice number must be in format INV-YYYY-XXXX. Given: INV-24-1"
        )

    def test_create_returns_success_for_valid_format(self):
        """Test create() wraps a valid number in Success."""
        result = InvoiceNumber.create("INV-2024-0001")

        assert isinstance(result, Success)
        assert result.value == InvoiceNumber("INV-2024-0001")

    def test_is_immutable(self):
        """Test value cannot be reassigned."""
        number = InvoiceNumber("INV-2024-0001")

        with pytest.raises(FrozenInstanceError):
            number.value = "INV-2024-0002"  # type: ignore[misc]


@pytest.mark.unit
class TestAmount:
    """Test Amount validation and behavior."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            (Decimal("1500.50"), Decimal("1500.50")),
            (1, Decimal("1")),
            (1500.5, Decimal("1500.5")),
            ("0.01", Decimal("0.01")),
            (" 42.10 ", Decimal("42.10")),
        ],
    )
    def test_converts_input_to_decimal(self, raw, expected):
        """Test ints, floats and numeric strings become exact Decimals."""
        amount = Amount(raw)

        assert isinstance(amount.value, Decimal)
        assert amount.value == expected

    @pytest.mark.parametrize(
        "raw", [0, Decimal("0"), -1, Decimal("-0.01"), "abc", "NaN", "Infinity", True]
    )
    def test_rejects_non_positive_or_non_numeric(self, raw):
        """Test zero, negatives, non-numbers, NaN, infinity and bools are rejected."""
        with pytest.raises(ValueError, match="Invoice amount must be greater than zero"):
            Amount(raw)

    def test_create_returns_failure_with_given_value(self):
        """Test create() returns INVALID_AMOUNT mentioning the given value."""
        result = Amount.create(Decimal("-5"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_AMOUNT
        assert result.error.message == (
            "Invoice amount must be greater than zero. Given: -5"
        )

    @pytest.mark.parametrize("raw", [Decimal("0.001"), Decimal("0.0049"), "0.004"])
    def test_rejects_amounts_that_round_to_zero_cents(self, raw):
        """Test amounts below half a cent cannot be stored and are invalid."""
        result = Amount.create(raw)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_AMOUNT
        assert "greater than zero" in result.error.message

    @pytest.mark.parametrize(
        "raw", [Decimal("1E+13"), Decimal("9999999999999.995"), Decimal("1E+40")]
    )
    def test_rejects_amounts_too_large_for_storage(self, raw):
        """Test amounts of 10^13 or more (after rounding) are invalid."""
        result = Amount.create(raw)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_AMOUNT
        assert result.error.message.startswith(
            "Invoice amount must be less than 10000000000000."
        )

    def test_direct_construction_of_too_large_amount_raises(self):
        """Test the constructor raises ValueError like other invalid amounts."""
        with pytest.raises(ValueError, match="must be less than"):
            Amount(Decimal("1E+13"))

    @pytest.mark.parametrize(
        "raw", [Decimal("0.005"), Decimal("0.01"), Decimal("9999999999999.99")]
    )
    def test_accepts_storage_bounds(self, raw):
        """Test the smallest and largest storable amounts are valid."""
        assert isinstance(Amount.create(raw), Success)

    def test_equality_within_tolerance(self):
        """Test amounts closer than 0.0001 compare equal."""
        assert Amount(Decimal("100.00")) == Amount(Decimal("100.00005"))

    def test_inequality_beyond_tolerance(self):
        """Test amounts 0.0001 apart or more are different."""
        assert Amount(Decimal("100.00")) != Amount(Decimal("100.0001"))
        assert Amount(Decimal("100.00")) != Amount(Decimal("100.01"))

    def test_is_not_hashable(self):
        """Test tolerance equality disables hashing."""
        with pytest.raises(TypeError):
            hash(Amount(Decimal("1")))

    @pytest.mark.parametrize(
        "raw,cents",
        [
            (Decimal("1500.5"), Decimal("1500.50")),
            (Decimal("10.005"), Decimal("10.01")),
            (Decimal("10.004"), Decimal("10.00")),
        ],
    )
    def test_to_cents_rounds_half_up(self, raw, cents):
        """Test to_cents() quantizes to two places, rounding half up."""
        assert Amount(raw).to_cents() == cents

    def test_str_shows_two_decimals(self):
        """Test str() is the cent representation."""
        assert str(Amount(Decimal("1500.5"))) == "1500.50"


@pytest.mark.unit
class TestIdentifiers:
    """Test identifier value objects."""

    @pytest.mark.parametrize(
        "cls", [InvoiceId, ApprovalId, SubmitterId, SupervisorId, ApproverId]
    )
    def test_strips_surrounding_whitespace(self, cls):
        """Test identifiers are normalized."""
        identifier = cls("  abc-123  ")

        assert identifier.value == "abc-123"
        assert str(identifier) == "abc-123"

    @pytest.mark.parametrize(
        "cls", [InvoiceId, ApprovalId, SubmitterId, SupervisorId, ApproverId]
    )
    @pytest.mark.parametrize("value", ["", "   ", "0", " 0 "])
    def test_rejects_empty_values(self, cls, value):
        """Test blank strings and the literal "0" are empty identifiers."""
        with pytest.raises(ValueError):
            cls(value)

    @pytest.mark.parametrize(
        "cls,code",
        [
            (InvoiceId, ErrorCode.EMPTY_INVOICE_ID),
            (ApprovalId, ErrorCode.EMPTY_APPROVAL_ID),
            (SubmitterId, ErrorCode.EMPTY_SUBMITTER_ID),
            (SupervisorId, ErrorCode.EMPTY_SUPERVISOR_ID),
            (ApproverId, ErrorCode.EMPTY_APPROVER_ID),
        ],
    )
    def test_create_returns_kind_specific_error(self, cls, code):
        """Test each identifier kind reports its own empty error."""
        result = cls.create("")

        assert isinstance(result, Failure)
        assert result.error.code == code

    def test_equal_by_value(self):
        """Test identifiers with the same value are equal and hashable."""
        assert InvoiceId("a") == InvoiceId(" a ")
        assert len({InvoiceId("a"), InvoiceId("a")}) == 1

    def test_different_kinds_are_not_equal(self):
        """Test an InvoiceId never equals an ApprovalId with the same value."""
        assert InvoiceId("x") != ApprovalId("x")

    def test_repr_names_the_kind(self):
        """Test repr() shows the concrete class."""
        assert repr(ApproverId("sup-1")) == "ApproverId('sup-1')"
