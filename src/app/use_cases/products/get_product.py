"""GetProduct Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.product_repository import ProductRepository
from src.domain.principal import TenantScope
from .dtos import ProductResponseDTO


class GetProduct:

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def execute(self, scope: TenantScope, product_id: str) -> Result[ProductResponseDTO]:
        try:
            product = await self.product_repo.get_by_id(scope.tenant_id, product_id)
            if not product:
                return Return.err(
                    Error(
                        code="PRODUCT_NOT_FOUND",
                        message=f"Product {product_id} not found",
                        reason="Product does not exist in this tenant",
                    )
                )
            return Return.ok(ProductResponseDTO.model_validate(product))

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_PRODUCT_FAILED",
                    message="Failed to load product",
                    reason=str(e),
                )
            )
