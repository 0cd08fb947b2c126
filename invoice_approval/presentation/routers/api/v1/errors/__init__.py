"""RFC 9457 error responses."""

from invoice_approval.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from invoice_approval.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from invoice_approval.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
