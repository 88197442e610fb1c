"""GetSettings Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.user_settings_repository import UserSettingsRepository
from src.domain.principal import TenantScope
from src.domain.user_settings import UserSettings
from .dtos import SettingsResponseDTO


def build_settings_response(settings: UserSettings) -> SettingsResponseDTO:
    return SettingsResponseDTO(
        id=settings.id,
        profile=settings.profile or None,
        business=settings.business or None,
        invoice_settings=settings.invoice_settings or {},
        updated_at=settings.updated_at,
    )


class GetSettings:
    """
    Use Case: Load the tenant's settings

    A tenant without saved settings gets the defaults rather than an error.
    """

    def __init__(self, settings_repo: UserSettingsRepository):
        self.settings_repo = settings_repo

    async def execute(self, scope: TenantScope) -> Result[SettingsResponseDTO]:
        try:
            settings = await self.settings_repo.get_by_tenant(scope.tenant_id)
            if not settings:
                return Return.ok(SettingsResponseDTO())
            return Return.ok(build_settings_response(settings))

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_SETTINGS_FAILED",
                    message="Failed to load settings",
                    reason=str(e),
                )
            )
