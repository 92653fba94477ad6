"""Invoicing use cases"""
from .generate_invoice import GenerateInvoice
from .quote_invoice import QuoteInvoice
from .list_invoice_history import ListInvoiceHistory, MAX_HISTORY_RESULTS
from .download_invoice import DownloadInvoice
from .dtos import (
    LineItemDTO,
    GenerateInvoiceCommandDTO,
    PricedLineItemDTO,
    InvoiceQuoteResponseDTO,
    InvoiceDTO,
    InvoiceDocumentDTO,
    InvoiceHistoryResponseDTO,
)

__all__ = [
    "GenerateInvoice",
    "QuoteInvoice",
    "ListInvoiceHistory",
    "MAX_HISTORY_RESULTS",
    "DownloadInvoice",
    "LineItemDTO",
    "GenerateInvoiceCommandDTO",
    "PricedLineItemDTO",
    "InvoiceQuoteResponseDTO",
    "InvoiceDTO",
    "InvoiceDocumentDTO",
    "InvoiceHistoryResponseDTO",
]
