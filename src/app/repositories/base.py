"""Tenant Scoped Repository Interface

The verbs every tenant-owned entity is persisted through.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

EntityT = TypeVar("EntityT")


class TenantScopedRepository(ABC, Generic[EntityT]):
    """
    Repository interface for rows owned by a tenant

    Every read filters on tenant_id and every delete matches both the row id
    and the tenant id, so a stale or guessed id from another tenant is never
    visible nor removable.
    """

    @abstractmethod
    async def list_by_tenant(
        self,
        tenant_id: str,
        limit: int = 100,
        offset: int = 0,
    ) -> List[EntityT]:
        """
        List a tenant's rows, newest first

        Args:
            tenant_id: Tenant identifier
            limit: Maximum number of rows to return
            offset: Offset for pagination

        Returns:
            List of entities ordered by created_at descending
        """
        pass

    @abstractmethod
    async def get_by_id(self, tenant_id: str, entity_id: str) -> Optional[EntityT]:
        """
        Retrieve one row of the tenant

        Returns:
            Entity if it exists under tenant_id, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, entity: EntityT) -> EntityT:
        """
        Insert a new row; tenant_id and user_id must already be stamped

        Returns:
            Created entity
        """
        pass

    @abstractmethod
    async def update(self, entity: EntityT) -> EntityT:
        """
        Persist changes to a row previously loaded through get_by_id

        Returns:
            Updated entity
        """
        pass

    @abstractmethod
    async def delete(self, tenant_id: str, entity_id: str) -> bool:
        """
        Hard delete a row matching both id and tenant

        Returns:
            True if a row was removed, False if nothing matched
        """
        pass

    @abstractmethod
    async def search(self, tenant_id: str, query: str, limit: int = 10) -> List[EntityT]:
        """
        Case-insensitive substring search over the entity's search fields

        Args:
            tenant_id: Tenant identifier
            query: Text to look for
            limit: Maximum number of rows to return

        Returns:
            Matching entities
        """
        pass
