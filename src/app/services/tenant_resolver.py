"""Tenant Resolver

Derives the tenant scope of a request from an explicit SessionContext.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.identity_provider import IdentityProvider, IdentityProviderError
from src.domain.principal import ScopeSource, SessionContext, TenantScope

logger = logging.getLogger(__name__)

AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"


def _auth_required(reason: str) -> Result[TenantScope]:
    return Return.err(
        Error(
            code=AUTHENTICATION_REQUIRED,
            message="Tenant authentication required. Please log in again.",
            reason=reason,
        )
    )


class TenantResolver:
    """
    Resolution order:
    1. Cached principal: its id is both tenant id and user id
    2. Current session from the identity provider: tenant id from
       app_metadata["tenant_id"] when present, else the session principal id.
       user_metadata is writable by the user and never decides the tenant
    3. Otherwise AUTHENTICATION_REQUIRED; no scope is ever produced empty
    """

    def __init__(self, identity_provider: IdentityProvider):
        self.identity_provider = identity_provider

    async def resolve(self, context: SessionContext) -> Result[TenantScope]:
        if context.cached_principal is not None and context.cached_principal.id:
            principal_id = context.cached_principal.id
            return Return.ok(
                TenantScope(
                    tenant_id=principal_id,
                    user_id=principal_id,
                    source=ScopeSource.CACHE,
                    principal=context.cached_principal,
                )
            )

        if not context.access_token:
            return _auth_required("No cached principal and no access token")

        try:
            session = await self.identity_provider.get_current_session(context.access_token)
        except IdentityProviderError as e:
            logger.warning(f"Session lookup failed during tenant resolution: {e}")
            return _auth_required(f"Session lookup failed: {e}")

        if session is None or session.principal is None or not session.principal.id:
            logger.info("Access token does not belong to an active session")
            return _auth_required("No active session")

        principal = session.principal
        tenant_id = principal.app_metadata.get("tenant_id") or principal.id
        return Return.ok(
            TenantScope(
                tenant_id=str(tenant_id),
                user_id=principal.id,
                source=ScopeSource.SESSION,
                principal=principal,
            )
        )
