"""UpdateProduct Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.product_repository import ProductRepository
from src.domain.principal import TenantScope
from .dtos import UpdateProductCommandDTO, ProductResponseDTO

logger = logging.getLogger(__name__)


class UpdateProduct:
    """
    Use Case: Update product

    Business Rules:
    1. Only fields present in the command change
    2. Changing the SKU to one already in use yields SKU_TAKEN
    """

    def __init__(self, uow: UnitOfWork, product_repo: ProductRepository):
        self.uow = uow
        self.product_repo = product_repo

    async def execute(
        self,
        scope: TenantScope,
        product_id: str,
        command: UpdateProductCommandDTO,
    ) -> Result[ProductResponseDTO]:
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

            changes = command.changes()
            new_sku = changes.get("sku")
            if new_sku and new_sku != product.sku and await self.product_repo.sku_exists(new_sku):
                return Return.err(
                    Error(
                        code="SKU_TAKEN",
                        message=f"SKU {new_sku} is already in use",
                        reason="SKUs are unique across the catalog",
                    )
                )

            for field, value in changes.items():
                setattr(product, field, value)

            updated = await self.product_repo.update(product)
            await self.uow.commit()

            return Return.ok(ProductResponseDTO.model_validate(updated))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update product {product_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_PRODUCT_FAILED",
                    message="Failed to update product",
                    reason=str(e),
                )
            )
