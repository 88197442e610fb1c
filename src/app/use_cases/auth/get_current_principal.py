"""GetCurrentPrincipal Use Case"""

from libs.result import Result, Return, Error
from src.app.services.tenant_resolver import AUTHENTICATION_REQUIRED
from src.domain.principal import TenantScope
from .dtos import CurrentPrincipalDTO, PrincipalDTO


class GetCurrentPrincipal:
    """
    Use Case: Describe the caller and the tenant its requests are scoped to
    """

    async def execute(self, scope: TenantScope) -> Result[CurrentPrincipalDTO]:
        if scope.principal is None:
            return Return.err(
                Error(
                    code=AUTHENTICATION_REQUIRED,
                    message="Tenant authentication required. Please log in again.",
                    reason="Scope was resolved without a principal",
                )
            )

        return Return.ok(
            CurrentPrincipalDTO(
                principal=PrincipalDTO.from_principal(scope.principal),
                tenant_id=scope.tenant_id,
                source=scope.source,
            )
        )
