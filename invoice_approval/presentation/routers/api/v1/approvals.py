"""Approvals resource router.

Endpoints:
    GET    /api/v1/approvals/{id}           - Get approval details
    PUT    /api/v1/approvals/{id}/approve   - Approve the invoice
    PUT    /api/v1/approvals/{id}/reject    - Reject the invoice with a reason
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import JSONResponse

from invoice_approval.application.commands.approval_commands import (
    ApproveInvoice,
    RejectInvoice,
)
from invoice_approval.application.commands.handlers import (
    ApproveInvoiceHandler,
    RejectInvoiceHandler,
)
from invoice_approval.application.queries.approval_queries import GetApproval
from invoice_approval.application.queries.handlers import GetApprovalHandler
from invoice_approval.core.container import (
    get_approve_invoice_handler,
    get_get_approval_handler,
    get_logger,
    get_reject_invoice_handler,
)
from invoice_approval.core.result import Failure, Success
from invoice_approval.domain.protocols.logger_protocol import LoggerProtocol
from invoice_approval.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from invoice_approval.presentation.routers.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from invoice_approval.schemas.approval_schemas import (
    ApprovalActionResponse,
    ApprovalRejectRequest,
    ApprovalResponse,
)

router = APIRouter(prefix="/approvals", tags=["Approvals"])

_ACTION_RESPONSES: dict[int | str, dict[str, object]] = {
    404: {"description": "Approval not found", "model": ProblemDetails},
    409: {"description": "Approval already resolved", "model": ProblemDetails},
}


@router.get(
    "/{approval_id}",
    response_model=ApprovalResponse,
    responses={404: {"description": "Approval not found", "model": ProblemDetails}},
    summary="Get approval",
)
async def get_approval(
    request: Request,
    approval_id: Annotated[str, Path(description="Approval identifier")],
    handler: GetApprovalHandler = Depends(get_get_approval_handler),
) -> ApprovalResponse | JSONResponse:
    """Get a specific approval process.

    GET /api/v1/approvals/{id} → 200 OK
    """
    result = await handler.handle(GetApproval(approval_id=approval_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ApprovalResponse.from_dto(result.value)


@router.put(
    "/{approval_id}/approve",
    response_model=ApprovalActionResponse,
    response_model_exclude_none=True,
    responses=_ACTION_RESPONSES,
    summary="Approve invoice",
)
async def approve_invoice(
    request: Request,
    approval_id: Annotated[str, Path(description="Approval identifier")],
    handler: ApproveInvoiceHandler = Depends(get_approve_invoice_handler),
    logger: LoggerProtocol = Depends(get_logger),
) -> ApprovalActionResponse | JSONResponse:
    """Approve the invoice behind an approval process.

    PUT /api/v1/approvals/{id}/approve → 200 OK

    Returns:
        ApprovalActionResponse on success.
        JSONResponse with RFC 9457 error on failure (404/409).
    """
    result = await handler.handle(ApproveInvoice(approval_id=approval_id))

    match result:
        case Failure(error=error):
            logger.warning(
                "invoice_approval_refused",
                approval_id=approval_id,
                error_code=error.code.value,
            )
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )
        case Success(value=approval):
            logger.info(
                "invoice_approval_recorded",
                approval_id=approval_id,
                invoice_id=str(approval.invoice_id),
            )
            return ApprovalActionResponse.approved(approval)


@router.put(
    "/{approval_id}/reject",
    response_model=ApprovalActionResponse,
    responses=_ACTION_RESPONSES,
    summary="Reject invoice",
)
async def reject_invoice(
    request: Request,
    approval_id: Annotated[str, Path(description="Approval identifier")],
    data: ApprovalRejectRequest,
    handler: RejectInvoiceHandler = Depends(get_reject_invoice_handler),
    logger: LoggerProtocol = Depends(get_logger),
) -> ApprovalActionResponse | JSONResponse:
    """Reject the invoice behind an approval process.

    PUT /api/v1/approvals/{id}/reject → 200 OK

    Returns:
        ApprovalActionResponse on success.
        JSONResponse with RFC 9457 error on failure (404/409, 422 for a bad reason).
    """
    result = await handler.handle(
        RejectInvoice(approval_id=approval_id, reason=data.reason)
    )

    match result:
        case Failure(error=error):
            logger.warning(
                "invoice_rejection_refused",
                approval_id=approval_id,
                error_code=error.code.value,
            )
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )
        case Success(value=approval):
            logger.info(
                "invoice_rejection_recorded",
                approval_id=approval_id,
                invoice_id=str(approval.invoice_id),
            )
            return ApprovalActionResponse.rejected(approval)
