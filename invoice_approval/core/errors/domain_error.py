"""Base domain error for railway-oriented programming.

DomainError is the base class for every business failure in the service.
Errors flow through the system as data inside Failure results; they are
never raised.

Architecture:
- Does NOT inherit from Exception (returned, not raised)
- Dataclass inheritance for concrete error families
- Typed as Result[T, DomainError] at the boundaries

Usage:
    from invoice_approval.core.errors import DomainError
    from invoice_approval.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from invoice_approval.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code.
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
