"""Application-wide exception handlers.

Domain failures are turned into problem responses by the routers through
ErrorResponseBuilder. Everything that escapes a router ends up here and
leaves as RFC 9457 Problem Details too:

- Starlette HTTPException: unknown paths (404), wrong methods (405) and any
  HTTPException raised by FastAPI itself.
- RequestValidationError: request bodies that do not match the schemas
  (non-numeric amount, missing fields, rejection reason out of bounds).
- Exception: anything else, including ApprovalPolicyError when an approval
  process cannot be started. Logged, then answered with an opaque 500.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from invoice_approval.core.config import settings
from invoice_approval.core.container import get_logger
from invoice_approval.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# status code -> (title, type slug)
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
    503: ("Service Unavailable", "service-unavailable"),
}
_UNKNOWN_STATUS = ("Error", "error")


def _problem_response(
    request: Request,
    *,
    status_code: int,
    slug: str,
    title: str,
    detail: str,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
        errors=errors,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer routing and framework HTTP errors with Problem Details.

    Headers carried by the exception (Allow on a 405) are kept.
    """
    assert isinstance(exc, HTTPException)

    title, slug = _HTTP_STATUS_INFO.get(exc.status_code, _UNKNOWN_STATUS)
    return _problem_response(
        request,
        status_code=exc.status_code,
        slug=slug,
        title=title,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Answer schema violations with 422 and one entry per offending field.

    Example:
        >>> # PUT /api/v1/approvals/{id}/reject with {"reason": "no"}
        >>> # {
        >>> #   "title": "Validation Failed",
        >>> #   "status": 422,
        >>> #   "errors": [
        >>> #     {"field": "reason", "code": "string_too_short", "message": "..."}
        >>> #   ],
        >>> #   ...
        >>> # }
    """
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ("body", "reason") -> "reason"
        parts = [str(part) for part in error.get("loc", ()) if part != "body"]
        field_errors.append(
            ErrorDetail(
                field=".".join(parts) or "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    return _problem_response(
        request,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        slug="validation-failed",
        title="Validation Failed",
        detail="Request validation failed. Check 'errors' for details.",
        errors=field_errors or None,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected exception and answer 500 without internal details."""
    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=getattr(request.state, "trace_id", None),
        request_path=request.url.path,
        request_method=request.method,
    )

    return _problem_response(
        request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        slug="internal-server-error",
        title="Internal Server Error",
        detail="An unexpected error occurred. Please contact support with the trace ID.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers above on the application."""
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
