"""SignUp Use Case"""

from libs.result import Result, Return, Error
from src.app.services.identity_provider import IdentityProvider, IdentityProviderError, InvalidCredentials
from .dtos import SignUpCommandDTO, PrincipalDTO
from .errors import identity_provider_unavailable


class SignUp:
    """
    Use Case: Register a principal

    The full name is stored in the principal's metadata. The new principal's
    id becomes its tenant id.
    """

    def __init__(self, identity_provider: IdentityProvider):
        self.identity_provider = identity_provider

    async def execute(self, command: SignUpCommandDTO) -> Result[PrincipalDTO]:
        try:
            principal = await self.identity_provider.sign_up(
                command.email, command.password, command.full_name
            )
            return Return.ok(PrincipalDTO.from_principal(principal))

        except InvalidCredentials as e:
            return Return.err(
                Error(
                    code="SIGN_UP_REJECTED",
                    message="Sign-up was rejected",
                    reason=str(e),
                )
            )
        except IdentityProviderError as e:
            return Return.err(identity_provider_unavailable(e))
