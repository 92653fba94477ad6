"""Invoice Error Taxonomy

Errors raised by the invoicing core. Each one is caught at the use case
boundary and turned into a Result error with its own code.
"""

from dataclasses import dataclass
from typing import List, Sequence


@dataclass(frozen=True)
class Violation:
    """A single invalid field in a line-item submission"""

    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class InvoiceError(Exception):
    """Base class for invoicing failures"""


class ValidationError(InvoiceError):
    """
    Line items are missing or malformed

    Carries every violation found, not just the first one.
    """

    def __init__(self, violations: Sequence[Violation]):
        self.violations: List[Violation] = list(violations)
        super().__init__(
            "; ".join(f"{v.field}: {v.message}" for v in self.violations)
        )


class PersistenceError(InvoiceError):
    """The invoice record could not be durably saved"""


class DocumentExportError(InvoiceError):
    """The rendering engine failed to launch, timed out, or produced no PDF"""
