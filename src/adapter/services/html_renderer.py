"""Jinja2 Invoice Renderer Implementation

Renders an InvoiceRecord into the fixed-layout HTML invoice document.
Amounts are formatted with Babel; nothing is recalculated here.
"""

import os
from datetime import datetime
from typing import List

from babel.numbers import format_currency, format_percent
from jinja2 import Environment, FileSystemLoader, select_autoescape

from src.app.services.document_renderer import DocumentRenderer
from src.domain.invoice_record import InvoiceRecord

TEMPLATES_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")
INVOICE_TEMPLATE = "invoice.html"

DEFAULT_LOCALE = "en_IN"
DEFAULT_CURRENCY = "INR"
DEFAULT_BRAND_NAME = "Levitation"
DOCUMENT_TITLE = "INVOICE GENERATOR"
DATE_FORMAT = "%d/%m/%Y"

FOOTER_LINES = (
    "We are pleased to provide any further information you may require "
    "and look forward to assisting with your next order.",
    "Rest assured, it will be provided with the same level of service and satisfaction.",
)


class JinjaDocumentRenderer(DocumentRenderer):
    """
    Jinja2 implementation of DocumentRenderer

    Args:
        locale: Babel locale used for number formatting (e.g. "en_IN")
        currency: ISO 4217 currency code (e.g. "INR")
        brand_name: Issuer shown in the header
        show_item_names: Print item names instead of "Product N" labels
    """

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        currency: str = DEFAULT_CURRENCY,
        brand_name: str = DEFAULT_BRAND_NAME,
        show_item_names: bool = False,
    ):
        self.locale = locale
        self.currency = currency
        self.brand_name = brand_name
        self.show_item_names = show_item_names
        self.env = Environment(
            loader=FileSystemLoader(TEMPLATES_PATH),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def format_money(self, amount: float) -> str:
        return format_currency(amount, self.currency, locale=self.locale)

    def format_tax_rate(self, tax_rate: float) -> str:
        return format_percent(tax_rate, format="#,##0.##%", locale=self.locale)

    @staticmethod
    def format_date(value: datetime) -> str:
        return value.strftime(DATE_FORMAT)

    def _rows(self, record: InvoiceRecord) -> List[dict]:
        rows = []
        for index, item in enumerate(record.items, start=1):
            rows.append(
                {
                    "label": item.name if self.show_item_names else f"Product {index}",
                    "quantity": item.quantity,
                    "rate": self.format_money(item.rate),
                    "total": self.format_money(item.line_total),
                }
            )
        return rows

    def render(self, record: InvoiceRecord) -> str:
        """
        Render an invoice as an HTML document

        Args:
            record: Invoice to render

        Returns:
            Complete HTML document as a string
        """
        template = self.env.get_template(INVOICE_TEMPLATE)
        return template.render(
            brand_name=self.brand_name,
            brand_initial=self.brand_name[:1].upper(),
            title=DOCUMENT_TITLE,
            owner_name=record.owner_name,
            owner_email=record.owner_email,
            invoice_date=self.format_date(record.invoice_date),
            invoice_number=record.invoice_number,
            rows=self._rows(record),
            subtotal=self.format_money(record.subtotal),
            tax_percentage=self.format_tax_rate(record.tax_rate),
            tax_total=self.format_money(record.tax_total),
            grand_total=self.format_money(record.grand_total),
            footer_lines=FOOTER_LINES,
        )
