"""Invoice Line Domain Entity

Persisted priced line item of an invoice.
"""

from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, Float, ForeignKey, Integer, String
from src.domain.base import BaseModel
from src.domain.invoice_calculator import PricedLineItem


class InvoiceLine(BaseModel, table=True):
    """
    Invoice Line - one priced product within an invoice

    Domain Rules:
    - Each line belongs to exactly one invoice
    - position keeps the submission order (0-based)
    - line_total = quantity * rate, line_tax = line_total * invoice tax_rate
    """

    __tablename__ = "invoice_lines"
    __table_args__ = (
        Index("ix_invoice_lines_invoice_id", "invoice_id"),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(
            BigInteger().with_variant(Integer, "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
        description="Unique invoice line identifier (auto-increment)"
    )

    invoice_id: str = Field(
        sa_column=Column(String(32), ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    position: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Order of the line within the invoice"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Product name"
    )

    quantity: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="Number of units (>= 1)"
    )

    rate: float = Field(
        sa_column=Column(Float, nullable=False),
        description="Price per unit (>= 0)"
    )

    line_total: float = Field(
        sa_column=Column(Float, nullable=False),
        description="quantity * rate"
    )

    line_tax: float = Field(
        sa_column=Column(Float, nullable=False),
        description="Tax on line_total"
    )

    @classmethod
    def from_item(cls, invoice_id: str, position: int, item: PricedLineItem) -> "InvoiceLine":
        return cls(
            invoice_id=invoice_id,
            position=position,
            name=item.name,
            quantity=item.quantity,
            rate=item.rate,
            line_total=item.line_total,
            line_tax=item.line_tax,
        )

    def to_item(self) -> PricedLineItem:
        return PricedLineItem(
            name=self.name,
            quantity=self.quantity,
            rate=self.rate,
            line_total=self.line_total,
            line_tax=self.line_tax,
        )
