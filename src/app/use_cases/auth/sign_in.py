"""SignIn Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.identity_provider import IdentityProvider, IdentityProviderError, InvalidCredentials
from .dtos import SignInCommandDTO, PrincipalDTO, SessionDTO
from .errors import identity_provider_unavailable

logger = logging.getLogger(__name__)


class SignIn:
    """
    Use Case: Exchange credentials for a session

    The identity provider publishes SIGNED_IN, which populates the principal
    cache with the new access token.
    """

    def __init__(self, identity_provider: IdentityProvider):
        self.identity_provider = identity_provider

    async def execute(self, command: SignInCommandDTO) -> Result[SessionDTO]:
        try:
            session = await self.identity_provider.sign_in(command.email, command.password)

        except InvalidCredentials as e:
            logger.info(f"Rejected sign-in for {command.email}")
            return Return.err(
                Error(
                    code="INVALID_CREDENTIALS",
                    message="Invalid email or password",
                    reason=str(e),
                )
            )
        except IdentityProviderError as e:
            return Return.err(identity_provider_unavailable(e))

        return Return.ok(
            SessionDTO(
                access_token=session.access_token,
                refresh_token=session.refresh_token,
                expires_at=session.expires_at,
                principal=PrincipalDTO.from_principal(session.principal),
            )
        )
