"""ListCustomers Use Case"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.principal import TenantScope
from .dtos import CustomerResponseDTO


class ListCustomers:
    """
    Use Case: List the tenant's customers, newest first
    """

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(
        self,
        scope: TenantScope,
        limit: int = 100,
        offset: int = 0,
    ) -> Result[List[CustomerResponseDTO]]:
        try:
            customers = await self.customer_repo.list_by_tenant(scope.tenant_id, limit=limit, offset=offset)
            return Return.ok([CustomerResponseDTO.model_validate(c) for c in customers])

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_CUSTOMERS_FAILED",
                    message="Failed to list customers",
                    reason=str(e),
                )
            )
