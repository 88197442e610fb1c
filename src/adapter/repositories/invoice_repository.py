"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import List, Optional, Tuple
from sqlalchemy import and_, delete
from sqlmodel import select, func
from src.adapter.repositories.base import SqlAlchemyTenantScopedRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine


class SqlAlchemyInvoiceRepository(SqlAlchemyTenantScopedRepository[Invoice], InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Deleting an invoice removes its lines in the same transaction.
    """

    model = Invoice
    search_fields = ("invoice_number", "order_number")

    async def invoice_number_exists(
        self,
        tenant_id: str,
        invoice_number: str,
        exclude_invoice_id: Optional[str] = None,
    ) -> bool:
        statement = (
            select(func.count())
            .select_from(Invoice)
            .where(Invoice.tenant_id == tenant_id)
            .where(Invoice.invoice_number == invoice_number)
        )
        if exclude_invoice_id:
            statement = statement.where(Invoice.id != exclude_invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one() > 0

    async def list_summaries(
        self,
        tenant_id: str,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Tuple[Invoice, Optional[str]]]:
        statement = (
            select(Invoice, Customer.customer_name)
            .outerjoin(
                Customer,
                and_(Customer.id == Invoice.customer_id, Customer.tenant_id == Invoice.tenant_id),
            )
            .where(Invoice.tenant_id == tenant_id)
            .order_by(Invoice.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(statement)
        return [(invoice, customer_name) for invoice, customer_name in result.all()]

    async def delete(self, tenant_id: str, entity_id: str) -> bool:
        owned = (
            select(Invoice.id)
            .where(Invoice.id == entity_id)
            .where(Invoice.tenant_id == tenant_id)
        )
        await self.session.execute(
            delete(InvoiceLine).where(InvoiceLine.invoice_id.in_(owned))
        )
        return await super().delete(tenant_id, entity_id)
