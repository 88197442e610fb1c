"""Authenticated principal, session and tenant scope value objects"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class Principal(BaseModel):
    """User record as returned by the identity provider"""

    model_config = ConfigDict(frozen=True)

    id: str
    email: Optional[str] = None
    user_metadata: Dict[str, Any] = Field(default_factory=dict)
    app_metadata: Dict[str, Any] = Field(default_factory=dict, description="Server-controlled; users cannot edit it")


class AuthSession(BaseModel):
    model_config = ConfigDict(frozen=True)

    access_token: str
    refresh_token: Optional[str] = None
    expires_at: Optional[datetime] = None
    principal: Optional[Principal] = None


class SessionEvent(str, Enum):
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"


class ScopeSource(str, Enum):
    CACHE = "cache"
    SESSION = "session"


class TenantScope(BaseModel):
    """
    Tenant every read and write of a request is scoped to

    tenant_id filters reads and is stamped on inserts; user_id is stamped as
    the creating principal.
    """

    model_config = ConfigDict(frozen=True)

    tenant_id: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    source: ScopeSource = ScopeSource.SESSION
    principal: Optional[Principal] = Field(default=None, exclude=True)


class SessionContext(BaseModel):
    """Explicit per-request authentication inputs handed to the TenantResolver"""

    model_config = ConfigDict(frozen=True)

    access_token: Optional[str] = None
    cached_principal: Optional[Principal] = None
