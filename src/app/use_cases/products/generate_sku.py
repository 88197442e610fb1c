"""GenerateSku Use Case

Suggests a free SKU for the product form.
"""

import logging
import random
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.identifier_generator import (
    DEFAULT_MAX_ATTEMPTS,
    SKU_SUFFIX_WIDTH,
    IdentifierGenerator,
    sku_prefix,
)
from src.app.repositories.product_repository import ProductRepository
from src.domain.product import ProductType
from .dtos import SkuResponseDTO

logger = logging.getLogger(__name__)


class GenerateSku:
    """
    Use Case: Generate SKU

    Business Rules:
    1. The SKU was unused when checked; it is not reserved
    2. Ten collisions in a row end with IDENTIFIER_GENERATION_EXHAUSTED
    """

    def __init__(
        self,
        product_repo: ProductRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        rng: Optional[random.Random] = None,
    ):
        self.product_repo = product_repo
        self.generator = IdentifierGenerator(self._sku_exists, max_attempts=max_attempts, rng=rng)

    async def _sku_exists(self, sku: str) -> bool:
        return await self.product_repo.sku_exists(sku)

    async def execute(self, name: str, product_type: ProductType) -> Result[SkuResponseDTO]:
        try:
            result = await self.generator.generate(sku_prefix(name, product_type), SKU_SUFFIX_WIDTH)
            if result.is_err():
                return Return.err(result.error)
            return Return.ok(SkuResponseDTO(sku=result.value))

        except Exception as e:
            logger.error(f"Failed to generate SKU: {e}")
            return Return.err(
                Error(
                    code="GENERATE_SKU_FAILED",
                    message="Failed to generate SKU",
                    reason=str(e),
                )
            )
