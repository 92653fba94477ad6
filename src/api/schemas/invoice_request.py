"""Request schemas for Invoice API

Pydantic models for incoming HTTP requests. Field values are deliberately
loose: InvoiceCalculator validates them so that all problems are reported in
one response.
"""

from typing import Any, List, Optional
from pydantic import BaseModel, Field


class ProductRequestSchema(BaseModel):
    """A single product line"""

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


class InvoiceRequestSchema(BaseModel):
    """
    Request schema for generating or quoting an invoice

    Used for POST /invoice/generate and POST /invoice/calculate endpoints.
    """

    products: Optional[List[ProductRequestSchema]] = Field(
        default=None,
        description="Products in display order (at least one)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "products": [
                    {"name": "A", "quantity": 2, "rate": 100},
                    {"name": "B", "quantity": 1, "rate": 50},
                ]
            }
        }
