"""SQLAlchemy Unit of Work

Commits or rolls back the AsyncSession shared by a request's repositories.
"""

import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    Transaction boundary over one AsyncSession

    A failed commit (unique constraint on invoice number or SKU, lost
    connection) leaves the session rolled back before the error propagates,
    so the same session stays usable for the rest of the request.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(self):
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Commit failed, rolling back: {e}")
            await self.session.rollback()
            raise

    async def rollback(self):
        await self.session.rollback()
