"""
List Invoice History Use Case

Retrieves the invoices issued to an owner, most recent first.
"""
import logging
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.errors import PersistenceError
from .dtos import InvoiceDTO, InvoiceHistoryResponseDTO
from .errors import LIST_INVOICES_FAILED

logger = logging.getLogger(__name__)

MAX_HISTORY_RESULTS = 50


class ListInvoiceHistory:
    """
    Use case: View invoice history

    Invoices are ordered by created_at DESC and capped at 50.
    An owner without invoices gets an empty list, not an error.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        """
        Initialize with invoice repository.

        Args:
            invoice_repo: InvoiceRepository instance
        """
        self.invoice_repo = invoice_repo

    async def execute(self, owner_id: str) -> Result[InvoiceHistoryResponseDTO]:
        """
        List invoices for an owner.

        Args:
            owner_id: Owner identifier

        Returns:
            Result[InvoiceHistoryResponseDTO]: Invoices, newest first
        """
        try:
            records, total = await self.invoice_repo.get_by_owner_id(
                owner_id=owner_id,
                limit=MAX_HISTORY_RESULTS,
            )
        except PersistenceError as e:
            logger.error(f"Failed to fetch invoices for owner {owner_id}: {e}")
            return Return.err(
                Error(
                    code=LIST_INVOICES_FAILED,
                    message="Error fetching invoices",
                    reason=str(e),
                )
            )

        return Return.ok(
            InvoiceHistoryResponseDTO(
                invoices=[InvoiceDTO.from_record(r) for r in records[:MAX_HISTORY_RESULTS]],
                total=total,
                limit=MAX_HISTORY_RESULTS,
            )
        )
