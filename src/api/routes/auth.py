"""Auth API Routes

Sign-up, sign-in and sign-out against the identity provider.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from src.api.error import ClientError
from src.api.schemas.auth_request import SignInRequestSchema, SignUpRequestSchema
from src.app.services.identity_provider import IdentityProvider
from src.app.use_cases.auth import (
    GetCurrentPrincipal,
    SignIn,
    SignOut,
    SignUp,
    SignInCommandDTO,
    SignUpCommandDTO,
    CurrentPrincipalDTO,
    PrincipalDTO,
    SessionDTO,
)
from src.depends import get_identity_provider, get_tenant_scope, require_access_token
from src.domain.principal import TenantScope

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/sign-up", response_model=PrincipalDTO, status_code=status.HTTP_201_CREATED)
async def sign_up(
    request: SignUpRequestSchema,
    identity_provider: IdentityProvider = Depends(get_identity_provider),
):
    """
    Register a new principal. Its id becomes the tenant id of everything it creates.
    """
    command = SignUpCommandDTO(email=request.email, password=request.password, full_name=request.full_name)
    result = await SignUp(identity_provider).execute(command)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.post(
    "/sign-in",
    response_model=SessionDTO,
    responses={
        401: {
            "description": "Invalid credentials",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVALID_CREDENTIALS",
                            "message": "Invalid email or password"
                        }
                    }
                }
            }
        }
    }
)
async def sign_in(
    request: SignInRequestSchema,
    identity_provider: IdentityProvider = Depends(get_identity_provider),
):
    """
    Exchange email and password for a bearer access token.

    Use the returned `access_token` as `Authorization: Bearer <token>` on
    every other endpoint.
    """
    command = SignInCommandDTO(email=request.email, password=request.password)
    result = await SignIn(identity_provider).execute(command)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.post("/sign-out", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(
    access_token: str = Depends(require_access_token),
    identity_provider: IdentityProvider = Depends(get_identity_provider),
):
    result = await SignOut(identity_provider).execute(access_token)

    if result.is_err():
        raise ClientError(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=CurrentPrincipalDTO)
async def me(scope: TenantScope = Depends(get_tenant_scope)):
    result = await GetCurrentPrincipal().execute(scope)

    if result.is_err():
        raise ClientError(result.error)
    return result.value
