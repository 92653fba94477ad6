"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from typing import Any, List, Optional
from pydantic import BaseModel, Field

from src.domain.invoice_calculator import InvoiceCalculation, PricedLineItem
from src.domain.invoice_record import InvoiceRecord


class LineItemDTO(BaseModel):
    """
    Raw line item as submitted by the caller

    Range checks are left to InvoiceCalculator so that every problem can be
    reported at once.
    """

    name: Optional[Any] = Field(
        default=None,
        description="Product name (required, non-empty)"
    )

    quantity: Optional[Any] = Field(
        default=None,
        description="Number of units (integer >= 1)"
    )

    rate: Optional[Any] = Field(
        default=None,
        description="Price per unit (>= 0)"
    )


class GenerateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for generating an invoice

    Used as input to GenerateInvoice use case.
    """

    owner_id: str = Field(..., description="Authenticated user identifier")
    owner_name: str = Field(..., description="Authenticated user name")
    owner_email: str = Field(..., description="Authenticated user email")
    products: Optional[List[LineItemDTO]] = Field(
        default=None,
        description="Line items in display order"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "owner_id": "user_123",
                "owner_name": "Asha Rao",
                "owner_email": "asha@example.com",
                "products": [
                    {"name": "A", "quantity": 2, "rate": 100},
                    {"name": "B", "quantity": 1, "rate": 50},
                ],
            }
        }


class PricedLineItemDTO(BaseModel):
    """Priced line item returned to clients"""

    name: str = Field(..., description="Product name")
    quantity: int = Field(..., description="Number of units")
    rate: float = Field(..., description="Price per unit")
    line_total: float = Field(..., description="quantity * rate")
    line_tax: float = Field(..., description="Tax on line_total")

    @classmethod
    def from_item(cls, item: PricedLineItem) -> "PricedLineItemDTO":
        return cls(
            name=item.name,
            quantity=item.quantity,
            rate=item.rate,
            line_total=item.line_total,
            line_tax=item.line_tax,
        )


class InvoiceQuoteResponseDTO(BaseModel):
    """
    Response DTO for a price calculation that is not persisted

    Returned by QuoteInvoice use case.
    """

    products: List[PricedLineItemDTO] = Field(..., description="Priced line items")
    subtotal: float = Field(..., description="Sum of line totals")
    tax_total: float = Field(..., description="Sum of line taxes")
    grand_total: float = Field(..., description="subtotal + tax_total")
    tax_rate: float = Field(..., description="Tax rate applied (e.g. 0.18)")

    @classmethod
    def from_calculation(cls, calculation: InvoiceCalculation) -> "InvoiceQuoteResponseDTO":
        return cls(
            products=[PricedLineItemDTO.from_item(item) for item in calculation.items],
            subtotal=calculation.subtotal,
            tax_total=calculation.tax_total,
            grand_total=calculation.grand_total,
            tax_rate=calculation.tax_rate,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "products": [
                    {"name": "A", "quantity": 2, "rate": 100.0, "line_total": 200.0, "line_tax": 36.0},
                    {"name": "B", "quantity": 1, "rate": 50.0, "line_total": 50.0, "line_tax": 9.0},
                ],
                "subtotal": 250.0,
                "tax_total": 45.0,
                "grand_total": 295.0,
                "tax_rate": 0.18,
            }
        }


class InvoiceDTO(BaseModel):
    """Invoice record representation returned to clients"""

    invoice_id: str = Field(..., description="Unique invoice identifier")
    invoice_number: str = Field(..., description="Short display number")
    owner_id: str = Field(..., description="Owner identifier")
    owner_name: str = Field(..., description="Owner name at issue time")
    owner_email: str = Field(..., description="Owner email at issue time")
    products: List[PricedLineItemDTO] = Field(..., description="Priced line items")
    subtotal: float = Field(..., description="Sum of line totals")
    tax_total: float = Field(..., description="Sum of line taxes")
    grand_total: float = Field(..., description="subtotal + tax_total")
    tax_rate: float = Field(..., description="Tax rate applied")
    invoice_date: datetime = Field(..., description="Date printed on the invoice")
    created_at: datetime = Field(..., description="Creation timestamp")

    @classmethod
    def from_record(cls, record: InvoiceRecord) -> "InvoiceDTO":
        return cls(
            invoice_id=record.id,
            invoice_number=record.invoice_number,
            owner_id=record.owner_id,
            owner_name=record.owner_name,
            owner_email=record.owner_email,
            products=[PricedLineItemDTO.from_item(item) for item in record.items],
            subtotal=record.subtotal,
            tax_total=record.tax_total,
            grand_total=record.grand_total,
            tax_rate=record.tax_rate,
            invoice_date=record.invoice_date,
            created_at=record.created_at,
        )


class InvoiceDocumentDTO(BaseModel):
    """
    Response DTO for a rendered invoice PDF

    Returned by GenerateInvoice and DownloadInvoice use cases.
    """

    invoice: InvoiceDTO = Field(..., description="The invoice the PDF was rendered from")
    filename: str = Field(..., description="Suggested download filename")
    pdf_bytes: bytes = Field(..., description="PDF document")

    @property
    def content_length(self) -> int:
        return len(self.pdf_bytes)


class InvoiceHistoryResponseDTO(BaseModel):
    """
    Response DTO for invoice history

    Returned by ListInvoiceHistory use case.
    """

    invoices: List[InvoiceDTO] = Field(..., description="Invoices, newest first")
    total: int = Field(..., description="Total invoices stored for the owner")
    limit: int = Field(..., description="Maximum number of invoices returned")
