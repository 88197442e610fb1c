"""SearchCustomers Use Case"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.principal import TenantScope
from .dtos import CustomerResponseDTO


class SearchCustomers:
    """
    Use Case: Case-insensitive substring search over customer and company name

    A blank query yields an empty list without touching the store.
    """

    def __init__(self, customer_repo: CustomerRepository, limit: int = 10):
        self.customer_repo = customer_repo
        self.limit = limit

    async def execute(self, scope: TenantScope, query: str) -> Result[List[CustomerResponseDTO]]:
        query = (query or "").strip()
        if not query:
            return Return.ok([])

        try:
            customers = await self.customer_repo.search(scope.tenant_id, query, limit=self.limit)
            return Return.ok([CustomerResponseDTO.model_validate(c) for c in customers])

        except Exception as e:
            return Return.err(
                Error(
                    code="SEARCH_CUSTOMERS_FAILED",
                    message="Failed to search customers",
                    reason=str(e),
                )
            )
