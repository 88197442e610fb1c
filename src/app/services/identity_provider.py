"""Identity Provider Interface

Contract of the external authentication service.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Optional
from src.domain.principal import AuthSession, Principal, SessionEvent

SessionListener = Callable[[SessionEvent, AuthSession], Awaitable[None]]


class IdentityProviderError(Exception):
    """The identity provider could not be reached or answered unexpectedly"""


class InvalidCredentials(IdentityProviderError):
    """Sign-in or sign-up was rejected by the identity provider"""


class IdentityProvider(ABC):
    """
    Identity/session collaborator

    Besides request/response calls it exposes a session-changed stream:
    listeners registered with subscribe() are awaited on every sign-in and
    sign-out performed through this provider.
    """

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> AuthSession:
        """
        Exchange credentials for a session

        Raises:
            InvalidCredentials: credentials were rejected
            IdentityProviderError: provider unavailable
        """
        pass

    @abstractmethod
    async def sign_up(self, email: str, password: str, full_name: str) -> Principal:
        """Register a new principal"""
        pass

    @abstractmethod
    async def sign_out(self, access_token: str) -> None:
        """Revoke an access token and emit SIGNED_OUT"""
        pass

    @abstractmethod
    async def get_current_session(self, access_token: str) -> Optional[AuthSession]:
        """
        Return the session an access token belongs to

        Returns:
            AuthSession, or None if the token is invalid or expired
        """
        pass

    @abstractmethod
    async def get_current_principal(self, access_token: str) -> Optional[Principal]:
        pass

    @abstractmethod
    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a session-changed listener

        Returns:
            Callable that removes the listener
        """
        pass
