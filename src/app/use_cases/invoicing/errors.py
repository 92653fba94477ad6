"""Error codes and Error builders shared by the invoicing use cases"""

from libs.result import Error
from src.domain.errors import ValidationError

VALIDATION_ERROR = "VALIDATION_ERROR"
PERSISTENCE_FAILED = "PERSISTENCE_FAILED"
DOCUMENT_EXPORT_FAILED = "DOCUMENT_EXPORT_FAILED"
INVOICE_NOT_FOUND = "INVOICE_NOT_FOUND"
LIST_INVOICES_FAILED = "LIST_INVOICES_FAILED"


def validation_failed(error: ValidationError) -> Error:
    return Error(
        code=VALIDATION_ERROR,
        message="Validation failed",
        reason=str(error),
        details=[violation.to_dict() for violation in error.violations],
    )
