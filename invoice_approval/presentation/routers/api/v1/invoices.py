"""Invoices resource router.

Endpoints:
    POST   /api/v1/invoices                 - Submit invoice (starts approval)
    GET    /api/v1/invoices/{id}            - Get invoice details
    GET    /api/v1/invoices/{id}/approval   - Get the invoice's approval process
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, status
from fastapi.responses import JSONResponse

from invoice_approval.application.commands.handlers import SubmitInvoiceHandler
from invoice_approval.application.commands.invoice_commands import SubmitInvoice
from invoice_approval.application.queries.approval_queries import GetApprovalByInvoice
from invoice_approval.application.queries.handlers import (
    GetApprovalByInvoiceHandler,
    GetInvoiceHandler,
)
from invoice_approval.application.queries.invoice_queries import GetInvoice
from invoice_approval.core.container import (
    get_get_approval_by_invoice_handler,
    get_get_invoice_handler,
    get_logger,
    get_submit_invoice_handler,
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
from invoice_approval.schemas.approval_schemas import ApprovalResponse
from invoice_approval.schemas.invoice_schemas import (
    InvoiceCreateRequest,
    InvoiceCreateResponse,
    InvoiceResponse,
)

router = APIRouter(prefix="/invoices", tags=["Invoices"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=InvoiceCreateResponse,
    responses={
        400: {"description": "Invalid invoice", "model": ProblemDetails},
        409: {"description": "Duplicate invoice number", "model": ProblemDetails},
    },
    summary="Submit invoice",
    description="Submit an invoice; its approval process starts automatically.",
)
async def submit_invoice(
    request: Request,
    data: InvoiceCreateRequest,
    handler: SubmitInvoiceHandler = Depends(get_submit_invoice_handler),
    logger: LoggerProtocol = Depends(get_logger),
) -> InvoiceCreateResponse | JSONResponse:
    """Submit a new invoice.

    POST /api/v1/invoices → 201 Created

    Returns:
        InvoiceCreateResponse on success (201 Created).
        JSONResponse with RFC 9457 error on failure (400/409).
    """
    command = SubmitInvoice(
        invoice_number=data.invoice_number,
        amount=data.amount,
        submitter_id=data.submitter_id,
        supervisor_id=data.supervisor_id,
    )
    result = await handler.handle(command)

    match result:
        case Failure(error=error):
            logger.warning(
                "invoice_submission_rejected",
                invoice_number=data.invoice_number,
                error_code=error.code.value,
            )
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )
        case Success(value=invoice):
            logger.info(
                "invoice_submission_accepted",
                invoice_id=str(invoice.id),
                invoice_number=str(invoice.number),
            )
            return InvoiceCreateResponse.from_entity(invoice)


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    responses={404: {"description": "Invoice not found", "model": ProblemDetails}},
    summary="Get invoice",
)
async def get_invoice(
    request: Request,
    invoice_id: Annotated[str, Path(description="Invoice identifier")],
    handler: GetInvoiceHandler = Depends(get_get_invoice_handler),
) -> InvoiceResponse | JSONResponse:
    """Get a specific invoice.

    GET /api/v1/invoices/{id} → 200 OK
    """
    result = await handler.handle(GetInvoice(invoice_id=invoice_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return InvoiceResponse.from_dto(result.value)


@router.get(
    "/{invoice_id}/approval",
    response_model=ApprovalResponse,
    responses={
        404: {"description": "No approval process found", "model": ProblemDetails}
    },
    summary="Get invoice approval",
    description="Latest approval process started for the invoice.",
)
async def get_invoice_approval(
    request: Request,
    invoice_id: Annotated[str, Path(description="Invoice identifier")],
    handler: GetApprovalByInvoiceHandler = Depends(
        get_get_approval_by_invoice_handler
    ),
) -> ApprovalResponse | JSONResponse:
    """Get the approval process of an invoice.

    GET /api/v1/invoices/{id}/approval → 200 OK
    """
    result = await handler.handle(GetApprovalByInvoice(invoice_id=invoice_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ApprovalResponse.from_dto(result.value)
