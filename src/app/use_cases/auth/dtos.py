"""Data Transfer Objects for Auth Use Cases"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field
from src.domain.principal import Principal, ScopeSource


class SignUpCommandDTO(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    full_name: str = Field(..., min_length=1)


class SignInCommandDTO(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class PrincipalDTO(BaseModel):
    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None

    @classmethod
    def from_principal(cls, principal: Principal) -> "PrincipalDTO":
        return cls(
            id=principal.id,
            email=principal.email,
            full_name=principal.user_metadata.get("full_name"),
        )


class SessionDTO(BaseModel):
    access_token: str
    refresh_token: Optional[str] = None
    token_type: str = "bearer"
    expires_at: Optional[datetime] = None
    principal: PrincipalDTO


class CurrentPrincipalDTO(BaseModel):
    """Caller identity together with the tenant scope it resolved to"""

    principal: PrincipalDTO
    tenant_id: str
    source: ScopeSource
