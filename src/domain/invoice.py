"""Invoice Domain Entity

Persisted header row of a generated invoice. Line items live in
invoice_lines; both are assembled back into an InvoiceRecord on read.
"""

from datetime import datetime
from typing import Sequence
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, Float, String
from src.domain.base import BaseModel
from src.domain.invoice_line import InvoiceLine
from src.domain.invoice_record import InvoiceRecord


class Invoice(BaseModel, table=True):
    """
    Invoice - one row per generated invoice

    Domain Rules:
    - id is a system generated uuid, unique
    - Rows are append-only: no update or delete path exists
    - Queried by owner_id, newest created_at first
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index("ix_invoices_owner_id_created_at", "owner_id", "created_at"),
    )

    id: str = Field(
        sa_column=Column(String(32), primary_key=True),
        description="Unique invoice identifier (uuid hex)"
    )

    owner_id: str = Field(
        sa_column=Column(String(64), nullable=False),
        description="Identifier of the user the invoice was issued for"
    )

    owner_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Owner display name at issue time"
    )

    owner_email: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Owner email at issue time"
    )

    subtotal: float = Field(
        sa_column=Column(Float, nullable=False),
        description="Sum of line totals"
    )

    tax_total: float = Field(
        sa_column=Column(Float, nullable=False),
        description="Sum of line taxes"
    )

    grand_total: float = Field(
        sa_column=Column(Float, nullable=False),
        description="subtotal + tax_total"
    )

    tax_rate: float = Field(
        sa_column=Column(Float, nullable=False),
        description="Tax rate applied to every line (e.g. 0.18)"
    )

    invoice_date: datetime = Field(
        sa_column=Column(DateTime, nullable=False),
        description="Date printed on the invoice"
    )

    created_at: datetime = Field(
        sa_column=Column(DateTime, nullable=False),
        description="Invoice creation timestamp"
    )

    @classmethod
    def from_record(cls, record: InvoiceRecord) -> "Invoice":
        return cls(
            id=record.id,
            owner_id=record.owner_id,
            owner_name=record.owner_name,
            owner_email=record.owner_email,
            subtotal=record.subtotal,
            tax_total=record.tax_total,
            grand_total=record.grand_total,
            tax_rate=record.tax_rate,
            invoice_date=record.invoice_date,
            created_at=record.created_at,
        )

    def to_record(self, lines: Sequence[InvoiceLine]) -> InvoiceRecord:
        """Rebuild the immutable record from this row and its lines"""
        ordered = sorted(lines, key=lambda line: line.position)
        return InvoiceRecord(
            id=self.id,
            owner_id=self.owner_id,
            owner_name=self.owner_name,
            owner_email=self.owner_email,
            items=tuple(line.to_item() for line in ordered),
            subtotal=self.subtotal,
            tax_total=self.tax_total,
            grand_total=self.grand_total,
            tax_rate=self.tax_rate,
            invoice_date=self.invoice_date,
            created_at=self.created_at,
        )
