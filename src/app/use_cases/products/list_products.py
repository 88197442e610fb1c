"""ListProducts Use Case"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.product_repository import ProductRepository
from src.domain.principal import TenantScope
from .dtos import ProductResponseDTO


class ListProducts:

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def execute(
        self,
        scope: TenantScope,
        limit: int = 100,
        offset: int = 0,
    ) -> Result[List[ProductResponseDTO]]:
        try:
            products = await self.product_repo.list_by_tenant(scope.tenant_id, limit=limit, offset=offset)
            return Return.ok([ProductResponseDTO.model_validate(p) for p in products])

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_PRODUCTS_FAILED",
                    message="Failed to list products",
                    reason=str(e),
                )
            )
