"""Authentication use cases"""
from .sign_up import SignUp
from .sign_in import SignIn
from .sign_out import SignOut
from .get_current_principal import GetCurrentPrincipal
from .dtos import (
    SignUpCommandDTO,
    SignInCommandDTO,
    PrincipalDTO,
    SessionDTO,
    CurrentPrincipalDTO,
)

__all__ = [
    "SignUp",
    "SignIn",
    "SignOut",
    "GetCurrentPrincipal",
    "SignUpCommandDTO",
    "SignInCommandDTO",
    "PrincipalDTO",
    "SessionDTO",
    "CurrentPrincipalDTO",
]
