"""GenerateInvoice Use Case

Prices the submitted line items, stores the invoice and renders it as a PDF.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.document_exporter import DocumentExporter
from src.app.services.document_renderer import DocumentRenderer, render_markup
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import DocumentExportError, PersistenceError, ValidationError
from src.domain.invoice_builder import build_invoice_record
from src.domain.invoice_calculator import InvoiceCalculator, LineItemInput
from src.domain.invoice_record import OwnerIdentity
from .dtos import GenerateInvoiceCommandDTO, InvoiceDTO, InvoiceDocumentDTO
from .errors import (
    DOCUMENT_EXPORT_FAILED,
    PERSISTENCE_FAILED,
    validation_failed,
)

logger = logging.getLogger(__name__)


class GenerateInvoice:
    """
    Use Case: Generate an invoice PDF from line items

    Business Rules:
    1. At least one line item; every invalid field is reported at once
    2. Invalid input never reaches persistence or rendering
    3. The invoice is committed before rendering starts
    4. No PDF is produced for an invoice that failed to save
    5. An export failure leaves the saved invoice in place (no retry)

    Flow:
    1. Calculate priced items and totals
    2. Build the invoice record
    3. Persist and commit
    4. Render markup
    5. Export markup to PDF
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        calculator: InvoiceCalculator,
        renderer: DocumentRenderer,
        exporter: DocumentExporter,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.calculator = calculator
        self.renderer = renderer
        self.exporter = exporter

    async def execute(self, command: GenerateInvoiceCommandDTO) -> Result[InvoiceDocumentDTO]:
        """
        Execute invoice generation

        Args:
            command: GenerateInvoiceCommandDTO with owner identity and products

        Returns:
            Result[InvoiceDocumentDTO]: Success with PDF bytes or error
        """
        # Step 1: Calculate
        items = [
            LineItemInput(name=p.name, quantity=p.quantity, rate=p.rate)
            for p in command.products or []
        ]
        try:
            calculation = self.calculator.calculate(items)
        except ValidationError as e:
            logger.info(f"Rejected invoice for owner {command.owner_id}: {e}")
            return Return.err(validation_failed(e))

        # Step 2: Build record
        owner = OwnerIdentity(
            id=command.owner_id,
            name=command.owner_name,
            email=command.owner_email,
        )
        record = build_invoice_record(calculation, owner)

        # Step 3: Persist
        try:
            await self.invoice_repo.create(record)
            await self.uow.commit()
        except PersistenceError as e:
            await self.uow.rollback()
            logger.error(f"Failed to save invoice {record.id}: {e}")
            return Return.err(
                Error(
                    code=PERSISTENCE_FAILED,
                    message="Failed to save invoice",
                    reason=str(e),
                )
            )

        logger.info(
            f"Invoice {record.id} saved for owner {record.owner_id} "
            f"({len(record.items)} items, grand total {record.grand_total})"
        )

        # Steps 4-5: Render and export
        try:
            markup = render_markup(self.renderer, record)
            pdf_bytes = await self.exporter.export(markup)
        except DocumentExportError as e:
            logger.error(f"Invoice {record.id} was saved but PDF export failed: {e}")
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
