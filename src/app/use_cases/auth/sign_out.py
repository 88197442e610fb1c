"""SignOut Use Case"""

from libs.result import Result, Return
from src.app.services.identity_provider import IdentityProvider, IdentityProviderError
from .errors import identity_provider_unavailable


class SignOut:
    """
    Use Case: Revoke the caller's access token

    The identity provider publishes SIGNED_OUT, which evicts the token from
    the principal cache.
    """

    def __init__(self, identity_provider: IdentityProvider):
        self.identity_provider = identity_provider

    async def execute(self, access_token: str) -> Result[None]:
        try:
            await self.identity_provider.sign_out(access_token)
        except IdentityProviderError as e:
            return Return.err(identity_provider_unavailable(e))
        return Return.ok()
