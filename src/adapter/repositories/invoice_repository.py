"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from collections import defaultdict
from typing import Dict, List, Optional, Tuple
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.errors import PersistenceError
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine
from src.domain.invoice_record import InvoiceRecord

# Drivers raise these for values a column cannot hold (e.g. integers past 64 bits).
STORAGE_ERRORS = (SQLAlchemyError, OverflowError, ValueError)


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations. Database errors (and values
    the driver cannot store) are re-raised as PersistenceError.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, record: InvoiceRecord) -> InvoiceRecord:
        """
        Stage a new invoice and its lines (committed by the unit of work)

        Args:
            record: InvoiceRecord to persist

        Returns:
            The same InvoiceRecord
        """
        try:
            self.session.add(Invoice.from_record(record))
            # Parent row must exist before the lines reference it.
            await self.session.flush()
            for position, item in enumerate(record.items):
                self.session.add(InvoiceLine.from_item(record.id, position, item))
            await self.session.flush()
        except STORAGE_ERRORS as e:
            raise PersistenceError(f"Could not store invoice {record.id}: {e}") from e
        return record

    async def get_by_id(self, invoice_id: str) -> Optional[InvoiceRecord]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            InvoiceRecord if found, None otherwise
        """
        try:
            statement = select(Invoice).where(Invoice.id == invoice_id)
            result = await self.session.execute(statement)
            invoice = result.scalar_one_or_none()
            if invoice is None:
                return None
            lines = await self._get_lines([invoice.id])
        except STORAGE_ERRORS as e:
            raise PersistenceError(f"Could not load invoice {invoice_id}: {e}") from e
        return invoice.to_record(lines.get(invoice.id, []))

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
        try:
            statement = (
                select(Invoice)
                .where(Invoice.owner_id == owner_id)
                .order_by(Invoice.created_at.desc())
                .limit(limit)
            )
            result = await self.session.execute(statement)
            invoices = list(result.scalars().all())

            count_statement = (
                select(func.count())
                .select_from(Invoice)
                .where(Invoice.owner_id == owner_id)
            )
            total = (await self.session.execute(count_statement)).scalar_one()

            lines = await self._get_lines([invoice.id for invoice in invoices])
        except STORAGE_ERRORS as e:
            raise PersistenceError(f"Could not list invoices for owner {owner_id}: {e}") from e

        records = [invoice.to_record(lines.get(invoice.id, [])) for invoice in invoices]
        return records, total

    async def _get_lines(self, invoice_ids: List[str]) -> Dict[str, List[InvoiceLine]]:
        if not invoice_ids:
            return {}
        statement = (
            select(InvoiceLine)
            .where(InvoiceLine.invoice_id.in_(invoice_ids))
            .order_by(InvoiceLine.invoice_id, InvoiceLine.position)
        )
        result = await self.session.execute(statement)
        grouped: Dict[str, List[InvoiceLine]] = defaultdict(list)
        for line in result.scalars().all():
            grouped[line.invoice_id].append(line)
        return grouped
