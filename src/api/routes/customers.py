"""Customer API Routes

CRUD and search over the caller's customers.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.use_cases.customers import (
    CreateCustomer,
    DeleteCustomer,
    GetCustomer,
    ListCustomers,
    SearchCustomers,
    UpdateCustomer,
    CreateCustomerCommandDTO,
    UpdateCustomerCommandDTO,
    CustomerResponseDTO,
)
from src.depends import get_session, get_tenant_scope
from src.domain.principal import TenantScope

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get("", response_model=List[CustomerResponseDTO])
async def list_customers(
    q: Optional[str] = Query(default=None, description="Search customer or company name"),
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    """
    List the caller's customers, newest first.

    With `q`, returns up to 10 customers whose customer or company name
    contains the text (case-insensitive).
    """
    customer_repo = SqlAlchemyCustomerRepository(session)
    if q is not None:
        result = await SearchCustomers(customer_repo, limit=ApplicationConfig.SEARCH_RESULT_LIMIT).execute(scope, q)
    else:
        result = await ListCustomers(customer_repo).execute(scope, limit=limit, offset=offset)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("/{customer_id}", response_model=CustomerResponseDTO)
async def get_customer(
    customer_id: str,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    result = await GetCustomer(SqlAlchemyCustomerRepository(session)).execute(scope, customer_id)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.post("", response_model=CustomerResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_customer(
    request: CreateCustomerCommandDTO,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreateCustomer(uow, SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(scope, request)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.patch("/{customer_id}", response_model=CustomerResponseDTO)
async def update_customer(
    customer_id: str,
    request: UpdateCustomerCommandDTO,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    """
    Update the fields present in the body; omitted fields keep their value.
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = UpdateCustomer(uow, SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(scope, customer_id, request)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(
    customer_id: str,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    uow = SqlAlchemyUnitOfWork(session)
    result = await DeleteCustomer(uow, SqlAlchemyCustomerRepository(session)).execute(scope, customer_id)

    if result.is_err():
        raise ClientError(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
