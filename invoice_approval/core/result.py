"""Result types for railway-oriented programming.

Use cases and aggregate transitions return a Result instead of raising.
Business rule violations travel as data (a Failure carrying a DomainError);
only programming errors and infrastructure faults are raised.

Usage:
    def approve(approval: Approval) -> Result[None, InvalidApprovalError]:
        if not approval.is_pending():
            return Failure(error=InvalidApprovalError.already_approved())
        return Success(value=None)

    match approve(approval):
        case Success():
            print("approved")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: The error describing why the operation failed.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
