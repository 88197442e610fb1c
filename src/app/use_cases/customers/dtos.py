"""Data Transfer Objects for Customer Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator
from src.domain.customer import CustomerType


class BillingAddressDTO(BaseModel):
    attention: Optional[str] = None
    street1: Optional[str] = None
    street2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pin_code: Optional[str] = None
    country: str = "India"
    phone: Optional[str] = None
    fax: Optional[str] = None


class CreateCustomerCommandDTO(BaseModel):
    """
    Command DTO for creating a customer

    Used as input to CreateCustomer use case.
    """

    customer_name: str = Field(..., min_length=1, description="Display name of the customer")
    company_name: Optional[str] = None
    customer_email: Optional[EmailStr] = None
    work_phone: str = Field(..., min_length=1)
    mobile: Optional[str] = None
    website: Optional[str] = None
    billing_address: BillingAddressDTO = Field(default_factory=BillingAddressDTO)
    customer_type: CustomerType = CustomerType.BUSINESS
    gst_treatment: str = "Registered Business - Regular"
    place_of_supply: Optional[str] = None
    tax_preference: str = "Taxable"
    currency: str = "INR"
    payment_terms: Optional[str] = None
    enable_portal: bool = False
    portal_language: str = "English"
    gst_in: Optional[str] = Field(default=None, max_length=15)
    pan_number: Optional[str] = Field(default=None, max_length=10)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "customer_name": "Asha Traders",
                "company_name": "Asha Traders Pvt Ltd",
                "customer_email": "accounts@ashatraders.in",
                "work_phone": "+91 80 4000 1234",
                "billing_address": {"city": "Bengaluru", "state": "Karnataka", "pin_code": "560001"},
                "gst_in": "29ABCDE1234F1Z5",
            }
        }
    )


class UpdateCustomerCommandDTO(BaseModel):
    """
    Typed partial update; only fields present in the request are applied
    """

    customer_name: Optional[str] = Field(default=None, min_length=1)
    company_name: Optional[str] = None
    customer_email: Optional[EmailStr] = None
    work_phone: Optional[str] = Field(default=None, min_length=1)
    mobile: Optional[str] = None
    website: Optional[str] = None
    billing_address: Optional[BillingAddressDTO] = None
    customer_type: Optional[CustomerType] = None
    gst_treatment: Optional[str] = None
    place_of_supply: Optional[str] = None
    tax_preference: Optional[str] = None
    currency: Optional[str] = None
    payment_terms: Optional[str] = None
    enable_portal: Optional[bool] = None
    portal_language: Optional[str] = None
    gst_in: Optional[str] = Field(default=None, max_length=15)
    pan_number: Optional[str] = Field(default=None, max_length=10)
    is_active: Optional[bool] = None

    @model_validator(mode="after")
    def required_fields_not_cleared(self):
        for name in ("customer_name", "work_phone", "billing_address", "customer_type"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be cleared")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class CustomerResponseDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    tenant_id: str
    user_id: str
    customer_name: str
    company_name: Optional[str] = None
    customer_email: Optional[str] = None
    work_phone: str
    mobile: Optional[str] = None
    website: Optional[str] = None
    billing_address: BillingAddressDTO
    customer_type: CustomerType
    gst_treatment: str
    place_of_supply: Optional[str] = None
    tax_preference: str
    currency: str
    payment_terms: Optional[str] = None
    enable_portal: bool
    portal_language: str
    gst_in: Optional[str] = None
    pan_number: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
