"""Mapping of identity provider failures to Result errors"""

from libs.result import Error
from src.app.services.identity_provider import IdentityProviderError


def identity_provider_unavailable(e: IdentityProviderError) -> Error:
    return Error(
        code="IDENTITY_PROVIDER_UNAVAILABLE",
        message="Authentication service is unavailable. Please try again later.",
        reason=str(e),
    )
