"""SQLAlchemy User Settings Repository Implementation"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.user_settings_repository import UserSettingsRepository
from src.domain.base import utc_now
from src.domain.user_settings import UserSettings


class SqlAlchemyUserSettingsRepository(UserSettingsRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_tenant(self, tenant_id: str) -> Optional[UserSettings]:
        statement = select(UserSettings).where(UserSettings.tenant_id == tenant_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def create(self, settings: UserSettings) -> UserSettings:
        self.session.add(settings)
        await self.session.flush()
        await self.session.refresh(settings)
        return settings

    async def update(self, settings: UserSettings) -> UserSettings:
        settings.updated_at = utc_now()
        self.session.add(settings)
        await self.session.flush()
        await self.session.refresh(settings)
        return settings
