"""CreateProduct Use Case

Adds a product or service to the caller's catalog.
"""

import logging
import random
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.identifier_generator import (
    DEFAULT_MAX_ATTEMPTS,
    SKU_SUFFIX_WIDTH,
    IdentifierGenerator,
    sku_prefix,
)
from src.app.repositories.product_repository import ProductRepository
from src.domain.product import Product
from src.domain.principal import TenantScope
from .dtos import CreateProductCommandDTO, ProductResponseDTO

logger = logging.getLogger(__name__)


class CreateProduct:
    """
    Use Case: Create product

    Business Rules:
    1. SKUs are unique across all tenants
    2. A blank SKU is generated (initials + PRD/SRV + 4 digits)
    3. A supplied SKU that already exists is rejected with SKU_TAKEN

    Flow:
    1. Resolve the SKU (generate or check)
    2. Create the product stamped with the scope
    3. Commit transaction
    4. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        product_repo: ProductRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        rng: Optional[random.Random] = None,
    ):
        self.uow = uow
        self.product_repo = product_repo
        self.generator = IdentifierGenerator(self._sku_exists, max_attempts=max_attempts, rng=rng)

    async def _sku_exists(self, sku: str) -> bool:
        return await self.product_repo.sku_exists(sku)

    async def execute(
        self,
        scope: TenantScope,
        command: CreateProductCommandDTO,
    ) -> Result[ProductResponseDTO]:
        try:
            # Step 1: Resolve SKU
            sku = (command.sku or "").strip()
            if not sku:
                sku_result = await self.generator.generate(
                    sku_prefix(command.name, command.product_type), SKU_SUFFIX_WIDTH
                )
                if sku_result.is_err():
                    return Return.err(sku_result.error)
                sku = sku_result.value
            elif await self.product_repo.sku_exists(sku):
                return Return.err(
                    Error(
                        code="SKU_TAKEN",
                        message=f"SKU {sku} is already in use",
                        reason="SKUs are unique across the catalog",
                    )
                )

            # Step 2: Create product
            data = command.model_dump(exclude={"sku"})
            product = Product(tenant_id=scope.tenant_id, user_id=scope.user_id, sku=sku, **data)
            created = await self.product_repo.create(product)

            # Step 3: Commit
            await self.uow.commit()

            logger.info(f"Product {created.id} ({created.sku}) created for tenant {scope.tenant_id}")
            return Return.ok(ProductResponseDTO.model_validate(created))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create product for tenant {scope.tenant_id}: {e}")
            return Return.err(
                Error(
                    code="CREATE_PRODUCT_FAILED",
                    message="Failed to create product",
                    reason=str(e),
                )
            )
