"""Unit tests for product use cases"""

import pytest
import random
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from src.app.use_cases.products import (
    CreateProduct,
    CreateProductCommandDTO,
    DeleteProduct,
    GenerateSku,
    UpdateProduct,
    UpdateProductCommandDTO,
)
from src.domain.product import Product, ProductType


@pytest.fixture
def product_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=lambda product: product)
    repo.update = AsyncMock(side_effect=lambda product: product)
    repo.get_by_id = AsyncMock(return_value=None)
    repo.delete = AsyncMock(return_value=True)
    repo.sku_exists = AsyncMock(return_value=False)
    return repo


def _product(**overrides):
    data = dict(
        id="prod_1",
        tenant_id="tenant_a",
        user_id="tenant_a",
        name="Blue steel pipe",
        sku="BSP-PRD-0001",
        unit_price=Decimal("450"),
        tax_percent=Decimal("18"),
    )
    data.update(overrides)
    return Product(**data)


@pytest.mark.asyncio
class TestCreateProduct:
    """Test SKU handling on product creation"""

    async def test_blank_sku_is_generated(self, mock_uow, product_repo, tenant_scope):
        # Arrange
        use_case = CreateProduct(mock_uow, product_repo, rng=random.Random(11))
        command = CreateProductCommandDTO(name="Blue steel pipe", unit_price=Decimal("450"))

        # Act
        result = await use_case.execute(tenant_scope, command)

        # Assert
        assert result.is_ok()
        assert result.value.sku.startswith("BSP-PRD-")
        assert len(result.value.sku) == len("BSP-PRD-0000")
        assert result.value.tenant_id == "tenant_a"
        mock_uow.commit.assert_called_once()

    async def test_service_sku_uses_srv_tag(self, mock_uow, product_repo, tenant_scope):
        command = CreateProductCommandDTO(
            name="Annual maintenance", product_type=ProductType.SERVICE, unit_price=Decimal("1200")
        )

        result = await CreateProduct(mock_uow, product_repo).execute(tenant_scope, command)

        assert result.value.sku.startswith("AM-SRV-")

    async def test_supplied_sku_in_use_is_rejected(self, mock_uow, product_repo, tenant_scope):
        product_repo.sku_exists = AsyncMock(return_value=True)
        command = CreateProductCommandDTO(name="Pipe", sku="PIPE-1", unit_price=Decimal("1"))

        result = await CreateProduct(mock_uow, product_repo).execute(tenant_scope, command)

        assert result.is_err()
        assert result.error.code == "SKU_TAKEN"
        product_repo.create.assert_not_called()

    async def test_exhausted_generation_creates_nothing(self, mock_uow, product_repo, tenant_scope):
        """
        Given: every generated SKU collides
        When: a product without SKU is created
        Then: IDENTIFIER_GENERATION_EXHAUSTED after 10 checks and nothing is stored
        """
        product_repo.sku_exists = AsyncMock(return_value=True)
        command = CreateProductCommandDTO(name="Pipe", unit_price=Decimal("1"))

        result = await CreateProduct(mock_uow, product_repo).execute(tenant_scope, command)

        assert result.is_err()
        assert result.error.code == "IDENTIFIER_GENERATION_EXHAUSTED"
        assert product_repo.sku_exists.await_count == 10
        product_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestUpdateProduct:

    async def test_changing_to_taken_sku_is_rejected(self, mock_uow, product_repo, tenant_scope):
        product_repo.get_by_id = AsyncMock(return_value=_product())
        product_repo.sku_exists = AsyncMock(return_value=True)

        result = await UpdateProduct(mock_uow, product_repo).execute(
            tenant_scope, "prod_1", UpdateProductCommandDTO(sku="OTHER-1")
        )

        assert result.error.code == "SKU_TAKEN"
        product_repo.update.assert_not_called()

    async def test_keeping_own_sku_is_allowed(self, mock_uow, product_repo, tenant_scope):
        product_repo.get_by_id = AsyncMock(return_value=_product())
        product_repo.sku_exists = AsyncMock(return_value=True)

        result = await UpdateProduct(mock_uow, product_repo).execute(
            tenant_scope,
            "prod_1",
            UpdateProductCommandDTO(sku="BSP-PRD-0001", unit_price=Decimal("500")),
        )

        assert result.is_ok()
        assert result.value.unit_price == Decimal("500")
        product_repo.sku_exists.assert_not_called()

    async def test_missing_product(self, mock_uow, product_repo, tenant_scope):
        result = await UpdateProduct(mock_uow, product_repo).execute(
            tenant_scope, "missing", UpdateProductCommandDTO(name="x")
        )

        assert result.error.code == "PRODUCT_NOT_FOUND"


@pytest.mark.asyncio
class TestProductMisc:

    async def test_delete_not_owned_is_not_found(self, mock_uow, product_repo, tenant_scope):
        product_repo.delete = AsyncMock(return_value=False)

        result = await DeleteProduct(mock_uow, product_repo).execute(tenant_scope, "prod_b")

        assert result.error.code == "PRODUCT_NOT_FOUND"
        product_repo.delete.assert_called_once_with("tenant_a", "prod_b")

    async def test_generate_sku_returns_free_sku(self, product_repo):
        product_repo.sku_exists = AsyncMock(side_effect=[True, False])

        result = await GenerateSku(product_repo, rng=random.Random(2)).execute(
            "Copper wire", ProductType.PRODUCT
        )

        assert result.is_ok()
        assert result.value.sku.startswith("CW-PRD-")
        assert product_repo.sku_exists.await_count == 2
