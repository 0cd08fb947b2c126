"""Core enums package.

Usage:
    from invoice_approval.core.enums import ErrorCode, Environment
"""

from invoice_approval.core.enums.environment import Environment
from invoice_approval.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
