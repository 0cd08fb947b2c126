"""Core errors package.

Usage:
    from invoice_approval.core.errors import DomainError
"""

from invoice_approval.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
