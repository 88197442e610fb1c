"""Product Repository Interface"""

from abc import abstractmethod
from src.app.repositories.base import TenantScopedRepository
from src.domain.product import Product


class ProductRepository(TenantScopedRepository[Product]):
    """Repository interface for Product persistence (searches name, description, sku)"""

    @abstractmethod
    async def sku_exists(self, sku: str) -> bool:
        """
        Check whether a SKU is already used by any product of any tenant

        Args:
            sku: Candidate SKU

        Returns:
            True if taken, False otherwise
        """
        pass
