"""Principal Cache Interface

Local record of authenticated principals keyed by access token. It is the
preferred source of the tenant scope; the identity provider is only asked
when the cache misses.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.principal import AuthSession, Principal, SessionEvent


class PrincipalCache(ABC):

    @abstractmethod
    async def get(self, access_token: str) -> Optional[Principal]:
        pass

    @abstractmethod
    async def put(self, access_token: str, principal: Principal) -> None:
        pass

    @abstractmethod
    async def evict(self, access_token: str) -> None:
        pass

    async def handle_session_event(self, event: SessionEvent, session: AuthSession) -> None:
        """Session-changed listener keeping the cache in step with sign-in/out"""
        if event == SessionEvent.SIGNED_IN and session.principal is not None:
            await self.put(session.access_token, session.principal)
        elif event == SessionEvent.SIGNED_OUT:
            await self.evict(session.access_token)
