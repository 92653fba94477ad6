from .base import BaseModel, generate_uuid
from .errors import DocumentExportError, InvoiceError, PersistenceError, ValidationError, Violation
from .invoice import Invoice
from .invoice_line import InvoiceLine
from .invoice_record import InvoiceRecord, OwnerIdentity
from .invoice_calculator import InvoiceCalculation, InvoiceCalculator, LineItemInput, PricedLineItem

__all__ = [
    "BaseModel",
    "generate_uuid",
    "DocumentExportError",
    "InvoiceError",
    "PersistenceError",
    "ValidationError",
    "Violation",
    "Invoice",
    "InvoiceLine",
    "InvoiceRecord",
    "OwnerIdentity",
    "InvoiceCalculation",
    "InvoiceCalculator",
    "LineItemInput",
    "PricedLineItem",
]
