"""Opaque identifier value objects.

Identifiers are non-empty strings. Repositories mint new ones with a
time-ordered UUID (uuid7), but any non-blank string other than "0" is
accepted so records created elsewhere can be reconstituted.

Usage:
    from invoice_approval.domain.value_objects import ApproverId

    match ApproverId.create(raw_supervisor_id):
        case Success(value=approver_id):
            ...
        case Failure(error=error):
            return Failure(error=error)
"""

from dataclasses import dataclass
from typing import Self

from invoice_approval.core.errors import DomainError
from invoice_approval.core.result import Failure, Result, Success
from invoice_approval.domain.errors import InvalidApprovalError, InvalidInvoiceError

# Values treated as "no identifier"
_EMPTY_VALUES: frozenset[str] = frozenset({"", "0"})


@dataclass(frozen=True)
class Identifier:
    """Base identifier value object.

    Subclasses only choose which domain error describes an empty value.

    Attributes:
        value: The identifier string (surrounding whitespace removed).

    Raises:
        ValueError: If the value is blank or "0".
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and normalize the identifier.

        Raises:
            ValueError: If value is not a string, is blank, or is "0".
        """
        if not isinstance(self.value, str):
            raise ValueError(self.empty_error().message)

        normalized = self.value.strip()
        if normalized in _EMPTY_VALUES:
            raise ValueError(self.empty_error().message)

        object.__setattr__(self, "value", normalized)

    @classmethod
    def empty_error(cls) -> DomainError:
        """Domain error describing an empty identifier of this kind."""
        raise NotImplementedError

    @classmethod
    def create(cls, value: str) -> Result[Self, DomainError]:
        """Build the identifier, returning a Failure instead of raising.

        Args:
            value: Raw identifier string.

        Returns:
            Success(identifier) or Failure(domain error for an empty value).
        """
        try:
            return Success(value=cls(value))
        except ValueError:
            return Failure(error=cls.empty_error())

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.value}')"


@dataclass(frozen=True, repr=False)
class InvoiceId(Identifier):
    """Identifier of an Invoice aggregate."""

    @classmethod
    def empty_error(cls) -> DomainError:
        return InvalidApprovalError.empty_invoice_id()


@dataclass(frozen=True, repr=False)
class ApprovalId(Identifier):
    """Identifier of an Approval aggregate."""

    @classmethod
    def empty_error(cls) -> DomainError:
        return InvalidApprovalError.empty_approval_id()


@dataclass(frozen=True, repr=False)
class SubmitterId(Identifier):
    """User who submitted an invoice."""

    @classmethod
    def empty_error(cls) -> DomainError:
        return InvalidInvoiceError.empty_submitter_id()


@dataclass(frozen=True, repr=False)
class SupervisorId(Identifier):
    """Supervisor responsible for approving an invoice."""

    @classmethod
    def empty_error(cls) -> DomainError:
        return InvalidInvoiceError.empty_supervisor_id()


@dataclass(frozen=True, repr=False)
class ApproverId(Identifier):
    """User who resolves an approval process."""

    @classmethod
    def empty_error(cls) -> DomainError:
        return InvalidApprovalError.empty_approver_id()
