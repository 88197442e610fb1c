"""SQLAlchemy Invoice Line Repository Implementation

Implements invoice line persistence using SQLAlchemy async session.
"""

from typing import List
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.domain.invoice_line import InvoiceLine


class SqlAlchemyInvoiceLineRepository(InvoiceLineRepository):
    """
    SQLAlchemy implementation of InvoiceLineRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_invoice_id(self, invoice_id: str) -> List[InvoiceLine]:
        statement = (
            select(InvoiceLine)
            .where(InvoiceLine.invoice_id == invoice_id)
            .order_by(InvoiceLine.position)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def replace_for_invoice(self, invoice_id: str, lines: List[InvoiceLine]) -> List[InvoiceLine]:
        await self.delete_for_invoice(invoice_id)
        self.session.add_all(lines)
        await self.session.flush()
        return lines

    async def delete_for_invoice(self, invoice_id: str) -> None:
        await self.session.execute(
            delete(InvoiceLine).where(InvoiceLine.invoice_id == invoice_id)
        )
