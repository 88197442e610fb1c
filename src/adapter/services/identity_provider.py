"""GoTrue Identity Provider Implementation

Talks to a GoTrue compatible auth REST API (Supabase Auth) over httpx.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional
import httpx
from src.app.services.identity_provider import (
    IdentityProvider,
    IdentityProviderError,
    InvalidCredentials,
    SessionListener,
)
from src.domain.principal import AuthSession, Principal, SessionEvent

logger = logging.getLogger(__name__)

REJECTED_STATUSES = (400, 401, 403, 422)


def principal_from_user(user: Dict[str, Any]) -> Principal:
    return Principal(
        id=str(user["id"]),
        email=user.get("email"),
        user_metadata=user.get("user_metadata") or {},
        app_metadata=user.get("app_metadata") or {},
    )


def session_from_token_response(payload: Dict[str, Any]) -> AuthSession:
    expires_at = payload.get("expires_at")
    return AuthSession(
        access_token=payload["access_token"],
        refresh_token=payload.get("refresh_token"),
        expires_at=datetime.fromtimestamp(expires_at, tz=timezone.utc) if expires_at else None,
        principal=principal_from_user(payload["user"]),
    )


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    return (
        body.get("error_description")
        or body.get("msg")
        or body.get("message")
        or body.get("error")
        or f"HTTP {response.status_code}"
    )


class GoTrueIdentityProvider(IdentityProvider):
    """
    httpx implementation of IdentityProvider

    Endpoints used:
    - POST /token?grant_type=password  sign in
    - POST /signup                     sign up, full_name stored in user metadata
    - POST /logout                     revoke the access token
    - GET  /user                       principal behind an access token

    Sign-in and sign-out are published to subscribed listeners.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize GoTrue identity provider

        Args:
            base_url: Auth API root, e.g. https://<project>.supabase.co/auth/v1
            api_key: Project API key sent as the apikey header
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used to stub the API
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport
        self._listeners: List[SessionListener] = []

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
            headers={"apikey": self.api_key, "Content-Type": "application/json"},
        )

    async def _request(
        self,
        method: str,
        path: str,
        access_token: Optional[str] = None,
        **kwargs,
    ) -> httpx.Response:
        headers = {"Authorization": f"Bearer {access_token}"} if access_token else {}
        try:
            async with self._client() as client:
                response = await client.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Identity provider request {method} {path} failed: {e}")
            raise IdentityProviderError(f"Identity provider unreachable: {e}") from e

        if response.status_code >= 500:
            logger.error(f"Identity provider answered {response.status_code} to {method} {path}")
            raise IdentityProviderError(_error_message(response))
        return response

    async def sign_in(self, email: str, password: str) -> AuthSession:
        response = await self._request(
            "POST",
            "/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        if response.status_code in REJECTED_STATUSES:
            logger.info(f"Sign-in rejected for {email}")
            raise InvalidCredentials(_error_message(response))
        if response.is_error:
            raise IdentityProviderError(_error_message(response))

        session = session_from_token_response(response.json())
        logger.info(f"Principal {session.principal.id} signed in")
        await self._notify(SessionEvent.SIGNED_IN, session)
        return session

    async def sign_up(self, email: str, password: str, full_name: str) -> Principal:
        response = await self._request(
            "POST",
            "/signup",
            json={"email": email, "password": password, "data": {"full_name": full_name}},
        )
        if response.status_code in REJECTED_STATUSES:
            logger.info(f"Sign-up rejected for {email}")
            raise InvalidCredentials(_error_message(response))
        if response.is_error:
            raise IdentityProviderError(_error_message(response))

        payload = response.json()
        # Auto-confirming projects answer with a full session instead of the user
        user = payload.get("user") if "access_token" in payload else payload
        principal = principal_from_user(user)
        logger.info(f"Principal {principal.id} signed up")
        return principal

    async def sign_out(self, access_token: str) -> None:
        principal = await self.get_current_principal(access_token)
        response = await self._request("POST", "/logout", access_token=access_token)
        if response.is_error and response.status_code not in REJECTED_STATUSES:
            raise IdentityProviderError(_error_message(response))

        await self._notify(
            SessionEvent.SIGNED_OUT,
            AuthSession(access_token=access_token, principal=principal),
        )

    async def get_current_session(self, access_token: str) -> Optional[AuthSession]:
        principal = await self.get_current_principal(access_token)
        if principal is None:
            return None
        return AuthSession(access_token=access_token, principal=principal)

    async def get_current_principal(self, access_token: str) -> Optional[Principal]:
        response = await self._request("GET", "/user", access_token=access_token)
        if response.status_code in REJECTED_STATUSES or response.status_code == 404:
            return None
        if response.is_error:
            raise IdentityProviderError(_error_message(response))
        return principal_from_user(response.json())

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def _notify(self, event: SessionEvent, session: AuthSession) -> None:
        for listener in list(self._listeners):
            try:
                await listener(event, session)
            except Exception as e:
                logger.error(f"Session listener failed on {event.value}: {e}")
