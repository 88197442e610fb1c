"""SQLAlchemy Product Repository Implementation"""

from sqlmodel import select, func
from src.adapter.repositories.base import SqlAlchemyTenantScopedRepository
from src.app.repositories.product_repository import ProductRepository
from src.domain.product import Product


class SqlAlchemyProductRepository(SqlAlchemyTenantScopedRepository[Product], ProductRepository):
    model = Product
    search_fields = ("name", "description", "sku")

    async def sku_exists(self, sku: str) -> bool:
        statement = select(func.count()).select_from(Product).where(Product.sku == sku)
        result = await self.session.execute(statement)
        return result.scalar_one() > 0
