"""User Settings Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.user_settings import UserSettings


class UserSettingsRepository(ABC):

    @abstractmethod
    async def get_by_tenant(self, tenant_id: str) -> Optional[UserSettings]:
        """Return the tenant's settings row, or None if never saved"""
        pass

    @abstractmethod
    async def create(self, settings: UserSettings) -> UserSettings:
        pass

    @abstractmethod
    async def update(self, settings: UserSettings) -> UserSettings:
        pass
