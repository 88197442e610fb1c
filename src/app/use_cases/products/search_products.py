"""SearchProducts Use Case"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.product_repository import ProductRepository
from src.domain.principal import TenantScope
from .dtos import ProductResponseDTO


class SearchProducts:
    """
    Use Case: Case-insensitive substring search over name, description and SKU
    """

    def __init__(self, product_repo: ProductRepository, limit: int = 10):
        self.product_repo = product_repo
        self.limit = limit

    async def execute(self, scope: TenantScope, query: str) -> Result[List[ProductResponseDTO]]:
        query = (query or "").strip()
        if not query:
            return Return.ok([])

        try:
            products = await self.product_repo.search(scope.tenant_id, query, limit=self.limit)
            return Return.ok([ProductResponseDTO.model_validate(p) for p in products])

        except Exception as e:
            return Return.err(
                Error(
                    code="SEARCH_PRODUCTS_FAILED",
                    message="Failed to search products",
                    reason=str(e),
                )
            )
