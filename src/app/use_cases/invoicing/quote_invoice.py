"""QuoteInvoice Use Case

Prices line items without persisting or rendering anything. Clients use it to
show live totals computed by the same calculator that issues invoices.
"""

from typing import List, Optional
from libs.result import Result, Return
from src.domain.errors import ValidationError
from src.domain.invoice_calculator import InvoiceCalculator, LineItemInput
from .dtos import InvoiceQuoteResponseDTO, LineItemDTO
from .errors import validation_failed


class QuoteInvoice:
    """Use Case: Calculate invoice totals for display"""

    def __init__(self, calculator: InvoiceCalculator):
        self.calculator = calculator

    async def execute(
        self, products: Optional[List[LineItemDTO]]
    ) -> Result[InvoiceQuoteResponseDTO]:
        items = [LineItemInput(p.name, p.quantity, p.rate) for p in products or []]
        try:
            calculation = self.calculator.calculate(items)
        except ValidationError as e:
            return Return.err(validation_failed(e))

        return Return.ok(InvoiceQuoteResponseDTO.from_calculation(calculation))
