"""Invoice Record

The immutable aggregate produced for every generated invoice.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from src.domain.invoice_calculator import PricedLineItem

INVOICE_NUMBER_LENGTH = 8


@dataclass(frozen=True)
class OwnerIdentity:
    """Authenticated caller, as supplied by the auth gateway"""

    id: str
    name: str
    email: str


@dataclass(frozen=True)
class InvoiceRecord:
    """
    InvoiceRecord - write-once invoice with its priced items

    Domain Rules:
    - items is non-empty and kept in submission order
    - subtotal = sum of line_total, tax_total = sum of line_tax
    - grand_total = subtotal + tax_total
    - Never updated or deleted once persisted
    """

    id: str
    owner_id: str
    owner_name: str
    owner_email: str
    items: Tuple[PricedLineItem, ...]
    subtotal: float
    tax_total: float
    grand_total: float
    tax_rate: float
    invoice_date: datetime
    created_at: datetime

    @property
    def invoice_number(self) -> str:
        """Short human-friendly number: last 8 characters of the id, uppercased"""
        return self.id[-INVOICE_NUMBER_LENGTH:].upper()

    @property
    def pdf_filename(self) -> str:
        return f"invoice-{self.id}.pdf"
