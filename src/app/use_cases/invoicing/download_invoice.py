"""DownloadInvoice Use Case

Re-renders a stored invoice as PDF, e.g. after an earlier export failed or
to fetch a copy from the history view.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.document_exporter import DocumentExporter
from src.app.services.document_renderer import DocumentRenderer, render_markup
from src.domain.errors import DocumentExportError, PersistenceError
from .dtos import InvoiceDTO, InvoiceDocumentDTO
from .errors import DOCUMENT_EXPORT_FAILED, INVOICE_NOT_FOUND, PERSISTENCE_FAILED

logger = logging.getLogger(__name__)


class DownloadInvoice:
    """
    Use Case: Download a stored invoice as PDF

    Business Rules:
    1. Invoice must exist and belong to the caller
    2. The stored amounts are rendered as-is, never recomputed
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        renderer: DocumentRenderer,
        exporter: DocumentExporter,
    ):
        self.invoice_repo = invoice_repo
        self.renderer = renderer
        self.exporter = exporter

    async def execute(self, invoice_id: str, owner_id: str) -> Result[InvoiceDocumentDTO]:
        try:
            record = await self.invoice_repo.get_by_id(invoice_id)
        except PersistenceError as e:
            logger.error(f"Failed to load invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code=PERSISTENCE_FAILED,
                    message="Failed to load invoice",
                    reason=str(e),
                )
            )

        # Other owners' invoices are reported as missing.
        if record is None or record.owner_id != owner_id:
            return Return.err(
                Error(
                    code=INVOICE_NOT_FOUND,
                    message=f"Invoice with ID {invoice_id} not found",
                    reason="Invoice does not exist",
                )
            )

        try:
            pdf_bytes = await self.exporter.export(render_markup(self.renderer, record))
        except DocumentExportError as e:
            logger.error(f"PDF export failed for invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code=DOCUMENT_EXPORT_FAILED,
                    message="Error generating PDF",
                    reason=str(e),
                )
            )

        return Return.ok(
            InvoiceDocumentDTO(
                invoice=InvoiceDTO.from_record(record),
                filename=record.pdf_filename,
                pdf_bytes=pdf_bytes,
            )
        )
