"""Data Transfer Objects for Settings Use Cases"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ProfileDTO(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr


class BusinessDTO(BaseModel):
    business_name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    gst: Optional[str] = Field(default=None, max_length=15)
    address: str = Field(..., min_length=1)
    website: Optional[str] = None


class InvoiceSettingsDTO(BaseModel):
    prefix: str = Field(default="INV", min_length=1, max_length=20, pattern=r"^[A-Za-z0-9/_]+$")
    next_number: int = Field(default=1, ge=1)


class SaveSettingsCommandDTO(BaseModel):
    """
    Command DTO for saving the tenant's settings

    Used as input to SaveSettings use case; the whole document is replaced.
    """

    profile: ProfileDTO
    business: BusinessDTO
    invoice_settings: InvoiceSettingsDTO = Field(default_factory=InvoiceSettingsDTO)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "profile": {"name": "Ravi Kumar", "email": "ravi@ashatraders.in"},
                "business": {
                    "business_name": "Asha Traders",
                    "email": "accounts@ashatraders.in",
                    "phone": "+91 80 4000 1234",
                    "gst": "29ABCDE1234F1Z5",
                    "address": "12 MG Road, Bengaluru",
                },
                "invoice_settings": {"prefix": "AT", "next_number": 1},
            }
        }
    )


class SettingsResponseDTO(BaseModel):
    """Saved settings; id is None while the tenant has never saved any"""

    id: Optional[str] = None
    profile: Optional[ProfileDTO] = None
    business: Optional[BusinessDTO] = None
    invoice_settings: InvoiceSettingsDTO = Field(default_factory=InvoiceSettingsDTO)
    updated_at: Optional[datetime] = None
