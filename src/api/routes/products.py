"""Product API Routes

Catalog CRUD, search and SKU suggestion.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories.product_repository import SqlAlchemyProductRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.use_cases.products import (
    CreateProduct,
    DeleteProduct,
    GenerateSku,
    GetProduct,
    ListProducts,
    SearchProducts,
    UpdateProduct,
    CreateProductCommandDTO,
    UpdateProductCommandDTO,
    ProductResponseDTO,
    SkuResponseDTO,
)
from src.depends import get_session, get_tenant_scope
from src.domain.principal import TenantScope
from src.domain.product import ProductType

router = APIRouter(prefix="/products", tags=["Products"])

CONFLICT_RESPONSES = {
    409: {
        "description": "SKU already in use or no free SKU found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "SKU_TAKEN",
                        "message": "SKU BSP-PRD-0427 is already in use"
                    }
                }
            }
        }
    }
}


@router.get("", response_model=List[ProductResponseDTO])
async def list_products(
    q: Optional[str] = Query(default=None, description="Search name, description or SKU"),
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    product_repo = SqlAlchemyProductRepository(session)
    if q is not None:
        result = await SearchProducts(product_repo, limit=ApplicationConfig.SEARCH_RESULT_LIMIT).execute(scope, q)
    else:
        result = await ListProducts(product_repo).execute(scope, limit=limit, offset=offset)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("/sku", response_model=SkuResponseDTO, responses=CONFLICT_RESPONSES)
async def generate_sku(
    name: str = Query(..., min_length=1),
    product_type: ProductType = Query(default=ProductType.PRODUCT),
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    """
    Suggest a SKU for a product form.

    Format: initials of the name (max 3) + `PRD`/`SRV` + 4 random digits,
    e.g. `BSP-PRD-0427`. The SKU was free when checked but is not reserved.
    """
    use_case = GenerateSku(
        SqlAlchemyProductRepository(session),
        max_attempts=ApplicationConfig.IDENTIFIER_MAX_ATTEMPTS,
    )
    result = await use_case.execute(name, product_type)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("/{product_id}", response_model=ProductResponseDTO)
async def get_product(
    product_id: str,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    result = await GetProduct(SqlAlchemyProductRepository(session)).execute(scope, product_id)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.post(
    "",
    response_model=ProductResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses=CONFLICT_RESPONSES,
)
async def create_product(
    request: CreateProductCommandDTO,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    """
    Create a product. Leave `sku` empty to have one generated.
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreateProduct(
        uow,
        SqlAlchemyProductRepository(session),
        max_attempts=ApplicationConfig.IDENTIFIER_MAX_ATTEMPTS,
    )
    result = await use_case.execute(scope, request)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.patch("/{product_id}", response_model=ProductResponseDTO, responses=CONFLICT_RESPONSES)
async def update_product(
    product_id: str,
    request: UpdateProductCommandDTO,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    uow = SqlAlchemyUnitOfWork(session)
    result = await UpdateProduct(uow, SqlAlchemyProductRepository(session)).execute(scope, product_id, request)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    uow = SqlAlchemyUnitOfWork(session)
    result = await DeleteProduct(uow, SqlAlchemyProductRepository(session)).execute(scope, product_id)

    if result.is_err():
        raise ClientError(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
