"""Invoice Record Builder

Assembles an InvoiceRecord from a calculation and the caller identity.
Persistence is left to the caller.
"""

from datetime import datetime
from typing import Callable, Optional

from src.domain.base import generate_uuid
from src.domain.invoice_calculator import InvoiceCalculation
from src.domain.invoice_record import InvoiceRecord, OwnerIdentity


def build_invoice_record(
    calculation: InvoiceCalculation,
    owner: OwnerIdentity,
    now: Optional[datetime] = None,
    id_factory: Callable[[], str] = generate_uuid,
) -> InvoiceRecord:
    """
    Build a fully populated invoice record

    Args:
        calculation: Output of InvoiceCalculator.calculate
        owner: Authenticated caller
        now: Timestamp for invoice_date and created_at (defaults to utcnow)
        id_factory: Source of unique invoice ids

    Returns:
        InvoiceRecord carrying the calculation's items and totals
    """
    timestamp = now or datetime.utcnow()
    return InvoiceRecord(
        id=id_factory(),
        owner_id=owner.id,
        owner_name=owner.name,
        owner_email=owner.email,
        items=calculation.items,
        subtotal=calculation.subtotal,
        tax_total=calculation.tax_total,
        grand_total=calculation.grand_total,
        tax_rate=calculation.tax_rate,
        invoice_date=timestamp,
        created_at=timestamp,
    )
