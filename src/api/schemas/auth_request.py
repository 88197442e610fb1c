"""Request schemas for Auth API

Pydantic models for validating incoming HTTP requests.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator


class SignUpRequestSchema(BaseModel):
    """
    Request schema for registering a principal

    Used for POST /auth/sign-up endpoint.
    """

    email: EmailStr = Field(..., description="Login email")
    password: str = Field(..., min_length=6, description="Password (min 6 characters)")
    full_name: str = Field(..., min_length=1, description="Display name stored in user metadata")

    @field_validator("full_name")
    @classmethod
    def strip_full_name(cls, v):
        if not v.strip():
            raise ValueError("Full name cannot be blank")
        return v.strip()


class SignInRequestSchema(BaseModel):
    """
    Request schema for signing in

    Used for POST /auth/sign-in endpoint.
    """

    email: EmailStr
    password: str = Field(..., min_length=1)
