from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import PersistenceError
from src.adapter.repositories.invoice_repository import STORAGE_ERRORS


class SqlAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(self):
        try:
            await self.session.commit()
        except STORAGE_ERRORS as e:
            raise PersistenceError(f"Commit failed: {e}") from e

    async def rollback(self):
        await self.session.rollback()
