"""SaveSettings Use Case

Creates the tenant's settings row on first save and overwrites it after.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.user_settings_repository import UserSettingsRepository
from src.domain.principal import TenantScope
from src.domain.user_settings import UserSettings
from .dtos import SaveSettingsCommandDTO, SettingsResponseDTO
from .get_settings import build_settings_response

logger = logging.getLogger(__name__)


class SaveSettings:
    """
    Use Case: Save settings (upsert)

    Business Rules:
    1. One settings row per tenant
    2. Profile, business and invoice settings are replaced as a whole
    3. The invoice prefix applies to invoice numbers generated afterwards
    """

    def __init__(self, uow: UnitOfWork, settings_repo: UserSettingsRepository):
        self.uow = uow
        self.settings_repo = settings_repo

    async def execute(
        self,
        scope: TenantScope,
        command: SaveSettingsCommandDTO,
    ) -> Result[SettingsResponseDTO]:
        try:
            data = command.model_dump(mode="json")
            settings = await self.settings_repo.get_by_tenant(scope.tenant_id)

            if settings:
                settings.profile = data["profile"]
                settings.business = data["business"]
                settings.invoice_settings = data["invoice_settings"]
                saved = await self.settings_repo.update(settings)
            else:
                saved = await self.settings_repo.create(
                    UserSettings(tenant_id=scope.tenant_id, user_id=scope.user_id, **data)
                )

            await self.uow.commit()
            logger.info(f"Settings saved for tenant {scope.tenant_id}")
            return Return.ok(build_settings_response(saved))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to save settings for tenant {scope.tenant_id}: {e}")
            return Return.err(
                Error(
                    code="SAVE_SETTINGS_FAILED",
                    message="Failed to save settings",
                    reason=str(e),
                )
            )
