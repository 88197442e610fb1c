from functools import lru_cache
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.identity_provider import GoTrueIdentityProvider
from src.adapter.services.principal_cache import create_principal_cache
from src.api.error import ClientError
from src.app.services.identity_provider import IdentityProvider
from src.app.services.principal_cache import PrincipalCache
from src.app.services.tenant_resolver import AUTHENTICATION_REQUIRED, TenantResolver
from src.domain.principal import ScopeSource, SessionContext, TenantScope

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


@lru_cache
def get_principal_cache() -> PrincipalCache:
    return create_principal_cache(
        ApplicationConfig.CACHE_BACKEND,
        redis_url=ApplicationConfig.REDIS_URL,
        ttl_seconds=ApplicationConfig.PRINCIPAL_CACHE_TTL_SECONDS,
    )


@lru_cache
def get_identity_provider() -> IdentityProvider:
    provider = GoTrueIdentityProvider(
        ApplicationConfig.IDENTITY_PROVIDER_URL,
        ApplicationConfig.IDENTITY_PROVIDER_API_KEY,
        timeout=ApplicationConfig.IDENTITY_PROVIDER_TIMEOUT,
    )
    provider.subscribe(get_principal_cache().handle_session_event)
    return provider


def get_access_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    return credentials.credentials if credentials else None


async def get_tenant_scope(
    access_token: Optional[str] = Depends(get_access_token),
    identity_provider: IdentityProvider = Depends(get_identity_provider),
    principal_cache: PrincipalCache = Depends(get_principal_cache),
) -> TenantScope:
    """
    Resolve the caller's tenant scope or answer 401

    A principal found through the session fallback is cached for later
    requests when its tenant is its own id, so both paths agree.
    """
    cached = await principal_cache.get(access_token) if access_token else None
    resolver = TenantResolver(identity_provider)
    result = await resolver.resolve(SessionContext(access_token=access_token, cached_principal=cached))
    if result.is_err():
        raise ClientError(result.error)

    scope = result.value
    if (
        scope.source == ScopeSource.SESSION
        and scope.principal is not None
        and scope.tenant_id == scope.principal.id
    ):
        await principal_cache.put(access_token, scope.principal)
    return scope


async def require_access_token(access_token: Optional[str] = Depends(get_access_token)) -> str:
    if not access_token:
        raise ClientError(
            Error(
                code=AUTHENTICATION_REQUIRED,
                message="Tenant authentication required. Please log in again.",
                reason="Missing bearer token",
            )
        )
    return access_token
