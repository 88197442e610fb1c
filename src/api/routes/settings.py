"""Settings API Routes"""

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.user_settings_repository import SqlAlchemyUserSettingsRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.use_cases.settings import (
    GetSettings,
    SaveSettings,
    SaveSettingsCommandDTO,
    SettingsResponseDTO,
)
from src.depends import get_session, get_tenant_scope
from src.domain.principal import TenantScope

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("", response_model=SettingsResponseDTO)
async def get_settings(
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    result = await GetSettings(SqlAlchemyUserSettingsRepository(session)).execute(scope)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.put("", response_model=SettingsResponseDTO)
async def save_settings(
    request: SaveSettingsCommandDTO,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    """
    Create or replace the caller's profile, business details and invoice
    settings. The business details are printed on exported invoices and the
    invoice prefix is used for newly generated invoice numbers.
    """
    uow = SqlAlchemyUnitOfWork(session)
    result = await SaveSettings(uow, SqlAlchemyUserSettingsRepository(session)).execute(scope, request)

    if result.is_err():
        raise ClientError(result.error)
    return result.value
