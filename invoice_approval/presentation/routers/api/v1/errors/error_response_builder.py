"""Error response builder for RFC 9457 Problem Details.

Builds RFC 9457 compliant error responses from domain errors returned by
the command and query handlers.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from invoice_approval.core.config import settings
from invoice_approval.core.enums import ErrorCode
from invoice_approval.core.errors import DomainError
from invoice_approval.presentation.routers.api.v1.errors.problem_details import (
    ProblemDetails,
)

# ErrorCode -> (HTTP status, title)
_ERROR_INFO: dict[ErrorCode, tuple[int, str]] = {
    ErrorCode.INVALID_AMOUNT: (status.HTTP_400_BAD_REQUEST, "Invalid Invoice"),
    ErrorCode.INVALID_INVOICE_NUMBER: (status.HTTP_400_BAD_REQUEST, "Invalid Invoice"),
    ErrorCode.EMPTY_SUBMITTER_ID: (status.HTTP_400_BAD_REQUEST, "Invalid Invoice"),
    ErrorCode.EMPTY_SUPERVISOR_ID: (status.HTTP_400_BAD_REQUEST, "Invalid Invoice"),
    ErrorCode.EMPTY_INVOICE_ID: (status.HTTP_400_BAD_REQUEST, "Invalid Request"),
    ErrorCode.EMPTY_APPROVER_ID: (status.HTTP_400_BAD_REQUEST, "Invalid Request"),
    ErrorCode.EMPTY_APPROVAL_ID: (status.HTTP_400_BAD_REQUEST, "Invalid Request"),
    ErrorCode.DUPLICATE_INVOICE_NUMBER: (
        status.HTTP_409_CONFLICT,
        "Duplicate Invoice Number",
    ),
    ErrorCode.APPROVAL_ALREADY_APPROVED: (
        status.HTTP_409_CONFLICT,
        "Approval Already Resolved",
    ),
    ErrorCode.APPROVAL_ALREADY_REJECTED: (
        status.HTTP_409_CONFLICT,
        "Approval Already Resolved",
    ),
    ErrorCode.APPROVAL_CONFLICT: (status.HTTP_409_CONFLICT, "Resource Conflict"),
    ErrorCode.INVOICE_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ErrorCode.APPROVAL_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> response = ErrorResponseBuilder.from_domain_error(
        ...     error=InvalidApprovalError.already_approved(),
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
        >>> response.status_code
        409
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert DomainError to RFC 9457 JSON response.

        Args:
            error: Domain error returned by a handler
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with RFC 9457 ProblemDetails content
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder.get_title(error.code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id or None,
        )

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(code: ErrorCode) -> int:
        """Map domain error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ErrorCode.INVOICE_NOT_FOUND)
            404
        """
        return _ERROR_INFO.get(code, (status.HTTP_500_INTERNAL_SERVER_ERROR, ""))[0]

    @staticmethod
    def get_title(code: ErrorCode) -> str:
        """Get human-readable title for domain error code."""
        return _ERROR_INFO.get(code, (0, "Internal Server Error"))[1]
