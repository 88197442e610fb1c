"""SQLAlchemy Tenant Scoped Repository Implementation

Shared implementation of the tenant scoped verbs over an async session.
"""

from typing import ClassVar, List, Optional, Sequence, Type
from sqlalchemy import delete, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.base import EntityT, TenantScopedRepository
from src.domain.base import utc_now


def like_pattern(query: str) -> str:
    """Wrap a user query for a substring LIKE, escaping LIKE wildcards"""
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SqlAlchemyTenantScopedRepository(TenantScopedRepository[EntityT]):
    """
    SQLAlchemy implementation of TenantScopedRepository

    Subclasses set ``model`` and ``search_fields``.
    """

    model: ClassVar[Type]
    search_fields: ClassVar[Sequence[str]] = ()

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_tenant(
        self,
        tenant_id: str,
        limit: int = 100,
        offset: int = 0,
    ) -> List[EntityT]:
        statement = (
            select(self.model)
            .where(self.model.tenant_id == tenant_id)
            .order_by(self.model.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_id(self, tenant_id: str, entity_id: str) -> Optional[EntityT]:
        statement = (
            select(self.model)
            .where(self.model.id == entity_id)
            .where(self.model.tenant_id == tenant_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def create(self, entity: EntityT) -> EntityT:
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def update(self, entity: EntityT) -> EntityT:
        entity.updated_at = utc_now()
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def delete(self, tenant_id: str, entity_id: str) -> bool:
        statement = (
            delete(self.model)
            .where(self.model.id == entity_id)
            .where(self.model.tenant_id == tenant_id)
        )
        result = await self.session.execute(statement)
        return result.rowcount > 0

    async def search(self, tenant_id: str, query: str, limit: int = 10) -> List[EntityT]:
        pattern = like_pattern(query)
        conditions = [
            getattr(self.model, field).ilike(pattern, escape="\\")
            for field in self.search_fields
        ]
        statement = (
            select(self.model)
            .where(self.model.tenant_id == tenant_id)
            .where(or_(*conditions))
            .order_by(self.model.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
