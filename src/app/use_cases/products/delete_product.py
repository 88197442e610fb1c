"""DeleteProduct Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.product_repository import ProductRepository
from src.domain.principal import TenantScope

logger = logging.getLogger(__name__)


class DeleteProduct:
    """Hard delete matched on id and tenant id. Existing invoice lines keep their snapshot."""

    def __init__(self, uow: UnitOfWork, product_repo: ProductRepository):
        self.uow = uow
        self.product_repo = product_repo

    async def execute(self, scope: TenantScope, product_id: str) -> Result[None]:
        try:
            deleted = await self.product_repo.delete(scope.tenant_id, product_id)
            if not deleted:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="PRODUCT_NOT_FOUND",
                        message=f"Product {product_id} not found",
                        reason="Product does not exist in this tenant",
                    )
                )

            await self.uow.commit()
            logger.info(f"Product {product_id} deleted for tenant {scope.tenant_id}")
            return Return.ok()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete product {product_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_PRODUCT_FAILED",
                    message="Failed to delete product",
                    reason=str(e),
                )
            )
