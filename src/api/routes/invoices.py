"""Invoice API Routes

FastAPI routes for invoice generation, quotes, history and downloads.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.auth import get_current_owner
from src.api.error import ClientError, ServerError
from src.api.schemas.invoice_request import InvoiceRequestSchema
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.document_exporter import DocumentExporter
from src.app.services.document_renderer import DocumentRenderer
from src.app.use_cases.invoicing import (
    DownloadInvoice,
    GenerateInvoice,
    GenerateInvoiceCommandDTO,
    InvoiceDocumentDTO,
    InvoiceHistoryResponseDTO,
    InvoiceQuoteResponseDTO,
    LineItemDTO,
    ListInvoiceHistory,
    QuoteInvoice,
)
from src.app.use_cases.invoicing.errors import INVOICE_NOT_FOUND, VALIDATION_ERROR
from src.depends import (
    get_document_exporter,
    get_document_renderer,
    get_invoice_calculator,
    get_session,
)
from src.domain.invoice_calculator import InvoiceCalculator
from src.domain.invoice_record import OwnerIdentity
from libs.result import Error

router = APIRouter(prefix="/invoice", tags=["Invoices"])

VALIDATION_ERROR_RESPONSE = {
    "description": "Validation error",
    "content": {
        "application/json": {
            "example": {
                "success": False,
                "message": "Validation failed",
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Validation failed",
                    "details": [
                        {"field": "products[0].quantity",
                         "message": "Product quantity must be an integer of at least 1"}
                    ]
                }
            }
        }
    }
}

EXPORT_ERROR_RESPONSE = {
    "description": "Invoice could not be saved or PDF export failed",
    "content": {
        "application/json": {
            "example": {
                "success": False,
                "message": "Error generating PDF",
                "error": {
                    "code": "DOCUMENT_EXPORT_FAILED",
                    "message": "Error generating PDF"
                }
            }
        }
    }
}


def _raise_for_error(error: Error):
    if error.code == VALIDATION_ERROR:
        raise ClientError(error)
    if error.code == INVOICE_NOT_FOUND:
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


def _pdf_response(document: InvoiceDocumentDTO) -> Response:
    return Response(
        content=document.pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{document.filename}"',
            "Content-Length": str(document.content_length),
        },
    )


def _to_line_items(request: InvoiceRequestSchema):
    if request.products is None:
        return None
    return [
        LineItemDTO(name=p.name, quantity=p.quantity, rate=p.rate)
        for p in request.products
    ]


@router.post(
    "/generate",
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        400: VALIDATION_ERROR_RESPONSE,
        500: EXPORT_ERROR_RESPONSE,
    }
)
async def generate_invoice(
    request: InvoiceRequestSchema,
    owner: OwnerIdentity = Depends(get_current_owner),
    session: AsyncSession = Depends(get_session),
    calculator: InvoiceCalculator = Depends(get_invoice_calculator),
    renderer: DocumentRenderer = Depends(get_document_renderer),
    exporter: DocumentExporter = Depends(get_document_exporter),
):
    """
    Generate an invoice PDF from products.

    The invoice is priced, saved to the caller's history and returned as a
    PDF download.

    **Request body:**
    - `products` (required): list of `{name, quantity, rate}`, at least one

    **Example request:**
    ```json
    {
      "products": [
        {"name": "A", "quantity": 2, "rate": 100},
        {"name": "B", "quantity": 1, "rate": 50}
      ]
    }
    ```

    **Returns:**
    - 200: PDF file (`invoice-<id>.pdf`)
    - 400: One or more products are invalid (all problems listed)
    - 500: Invoice could not be saved, or was saved but PDF export failed
    """
    uow = SqlAlchemyUnitOfWork(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)

    command = GenerateInvoiceCommandDTO(
        owner_id=owner.id,
        owner_name=owner.name,
        owner_email=owner.email,
        products=_to_line_items(request),
    )

    use_case = GenerateInvoice(uow, invoice_repo, calculator, renderer, exporter)
    result = await use_case.execute(command)

    if result.is_err():
        _raise_for_error(result.error)

    return _pdf_response(result.value)


@router.post(
    "/calculate",
    response_model=InvoiceQuoteResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={400: VALIDATION_ERROR_RESPONSE}
)
async def calculate_invoice(
    request: InvoiceRequestSchema,
    owner: OwnerIdentity = Depends(get_current_owner),
    calculator: InvoiceCalculator = Depends(get_invoice_calculator),
):
    """
    Price products without saving an invoice.

    Returns the same line totals, tax and grand total that /generate would
    store, so clients never compute money themselves.

    **Returns:**
    - 200: Priced products and totals
    - 400: One or more products are invalid
    """
    use_case = QuoteInvoice(calculator)
    result = await use_case.execute(_to_line_items(request))

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get(
    "/history",
    response_model=InvoiceHistoryResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_invoice_history(
    owner: OwnerIdentity = Depends(get_current_owner),
    session: AsyncSession = Depends(get_session),
):
    """
    List the caller's invoices, most recent first (at most 50).

    The body is `{invoices, total, limit}` at the top level, not wrapped in a
    `{success, data}` envelope; `total` counts all of the caller's invoices.

    **Returns:**
    - 200: Invoice list (empty when the caller has no invoices)
    """
    invoice_repo = SqlAlchemyInvoiceRepository(session)

    use_case = ListInvoiceHistory(invoice_repo)
    result = await use_case.execute(owner.id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get(
    "/{invoice_id}/pdf",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        404: {
            "description": "Invoice not found",
            "content": {
                "application/json": {
                    "example": {
                        "success": False,
                        "message": "Invoice with ID 9f1c... not found",
                        "error": {
                            "code": "INVOICE_NOT_FOUND",
                            "message": "Invoice with ID 9f1c... not found"
                        }
                    }
                }
            }
        },
        500: EXPORT_ERROR_RESPONSE,
    }
)
async def download_invoice_pdf(
    invoice_id: str,
    owner: OwnerIdentity = Depends(get_current_owner),
    session: AsyncSession = Depends(get_session),
    renderer: DocumentRenderer = Depends(get_document_renderer),
    exporter: DocumentExporter = Depends(get_document_exporter),
):
    """
    Download a previously generated invoice as PDF.

    **Path parameters:**
    - `invoice_id` (required): Invoice ID

    **Returns:**
    - 200: PDF file
    - 404: Invoice not found (or owned by someone else)
    - 500: PDF export failed
    """
    invoice_repo = SqlAlchemyInvoiceRepository(session)

    use_case = DownloadInvoice(invoice_repo, renderer, exporter)
    result = await use_case.execute(invoice_id, owner.id)

    if result.is_err():
        _raise_for_error(result.error)

    return _pdf_response(result.value)
