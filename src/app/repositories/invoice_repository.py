"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
Invoices are write-once: there is deliberately no update or delete.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.domain.invoice_record import InvoiceRecord


class InvoiceRepository(ABC):
    """
    Repository interface for InvoiceRecord persistence

    Implementations raise PersistenceError when the store fails.
    """

    @abstractmethod
    async def create(self, record: InvoiceRecord) -> InvoiceRecord:
        """
        Persist a new invoice record with its line items

        Args:
            record: InvoiceRecord to persist

        Returns:
            The persisted InvoiceRecord
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: str) -> Optional[InvoiceRecord]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            InvoiceRecord if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_owner_id(
        self,
        owner_id: str,
        limit: int = 50,
    ) -> Tuple[List[InvoiceRecord], int]:
        """
        Retrieve an owner's invoices, newest first

        Args:
            owner_id: Owner identifier
            limit: Maximum number of invoices to return

        Returns:
            Tuple of (invoices ordered by created_at desc, total count for owner)
        """
        pass
