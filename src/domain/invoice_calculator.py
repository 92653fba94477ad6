"""Invoice Calculator

Turns raw line items into priced line items and invoice totals. This is the
only place where invoice arithmetic happens; persistence, quotes and document
rendering all consume its output.
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, List, Optional, Sequence, Tuple

from src.domain.errors import ValidationError, Violation

TAX_RATE = 0.18

# Quantities are stored in a signed 64-bit column.
MAX_QUANTITY = 2 ** 63 - 1


@dataclass(frozen=True)
class LineItemInput:
    """A product line as submitted by the caller"""

    name: Any
    quantity: Any
    rate: Any


@dataclass(frozen=True)
class PricedLineItem:
    """
    A validated product line with its computed amounts

    Domain Rules:
    - line_total = quantity * rate
    - line_tax = line_total * tax_rate
    - No rounding; amounts are only rounded for display
    """

    name: str
    quantity: int
    rate: float
    line_total: float
    line_tax: float


@dataclass(frozen=True)
class InvoiceCalculation:
    """Priced items plus aggregate totals, in submission order"""

    items: Tuple[PricedLineItem, ...]
    subtotal: float
    tax_total: float
    grand_total: float
    tax_rate: float


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _as_quantity(value: Any) -> Optional[int]:
    """Whole number in 1..MAX_QUANTITY, or None. JSON 2.0 counts as 2."""
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if not isinstance(value, int) or isinstance(value, bool):
        return None
    if value < 1 or value > MAX_QUANTITY:
        return None
    return value


def _as_rate(value: Any) -> Optional[float]:
    """Finite non-negative float, or None"""
    if not _is_number(value):
        return None
    try:
        rate = float(value)
    except OverflowError:
        return None
    if not math.isfinite(rate) or rate < 0:
        return None
    return rate


class InvoiceCalculator:
    """
    Prices line items at a fixed tax rate

    The calculator is pure: no clock, no randomness, no I/O. Calculating the
    same items twice yields bit-identical results.
    """

    def __init__(self, tax_rate: float = TAX_RATE, field_prefix: str = "products"):
        if not _is_number(tax_rate) or tax_rate < 0:
            raise ValueError(f"tax_rate must be a non-negative number, got {tax_rate!r}")
        self.tax_rate = float(tax_rate)
        self.field_prefix = field_prefix

    def validate(self, items: Optional[Sequence[LineItemInput]]) -> None:
        """
        Check every line item and raise with all problems found

        Raises:
            ValidationError: listing each offending field
        """
        violations: List[Violation] = []

        if not items:
            violations.append(
                Violation(self.field_prefix, "At least one product is required")
            )
            raise ValidationError(violations)

        for index, item in enumerate(items):
            path = f"{self.field_prefix}[{index}]"

            if not isinstance(item.name, str) or not item.name.strip():
                violations.append(Violation(f"{path}.name", "Product name is required"))

            quantity = _as_quantity(item.quantity)
            if quantity is None:
                violations.append(
                    Violation(f"{path}.quantity", "Product quantity must be an integer of at least 1")
                )

            rate = _as_rate(item.rate)
            if rate is None:
                violations.append(
                    Violation(f"{path}.rate", "Product rate must be a non-negative number")
                )

            if quantity is not None and rate is not None:
                line_total = quantity * rate
                if not math.isfinite(line_total * self.tax_rate):
                    violations.append(Violation(path, "Product amount is too large"))

        if violations:
            raise ValidationError(violations)

    def price(self, item: LineItemInput) -> PricedLineItem:
        """Price a single, already validated, line item"""
        quantity = int(item.quantity)
        rate = float(item.rate)
        line_total = quantity * rate
        return PricedLineItem(
            name=item.name.strip(),
            quantity=quantity,
            rate=rate,
            line_total=line_total,
            line_tax=line_total * self.tax_rate,
        )

    def calculate(self, items: Optional[Sequence[LineItemInput]]) -> InvoiceCalculation:
        """
        Validate and price line items, then aggregate totals

        Args:
            items: Line items in display order

        Returns:
            InvoiceCalculation with subtotal, tax_total and grand_total

        Raises:
            ValidationError: if any item is invalid or the list is empty
        """
        self.validate(items)

        priced = tuple(self.price(item) for item in items)

        # Accumulate in item order so results are reproducible bit for bit.
        subtotal = 0.0
        tax_total = 0.0
        for line in priced:
            subtotal += line.line_total
            tax_total += line.line_tax

        if not math.isfinite(subtotal + tax_total):
            raise ValidationError([Violation(self.field_prefix, "Invoice total is too large")])

        return InvoiceCalculation(
            items=priced,
            subtotal=subtotal,
            tax_total=tax_total,
            grand_total=subtotal + tax_total,
            tax_rate=self.tax_rate,
        )
