"""Customer Domain Entity

Billing contacts owned by a tenant.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import JSON, String
from src.domain.base import BaseModel, generate_uuid, timestamp_column, utc_now


class CustomerType(str, Enum):
    BUSINESS = "Business"
    INDIVIDUAL = "Individual"


class Customer(BaseModel, table=True):
    """
    Customer - A party invoices are raised against

    Domain Rules:
    - Owned by exactly one tenant (tenant_id) and created by one user (user_id)
    - billing_address is stored as a JSON document
    - Deleting is a hard delete scoped by tenant_id
    """

    __tablename__ = "customers"
    __table_args__ = (
        Index("ix_customers_tenant_id", "tenant_id"),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str = Field(description="Owning tenant")
    user_id: str = Field(description="Principal that created the customer")

    customer_name: str = Field(sa_column=Column(String(255), nullable=False))
    company_name: Optional[str] = Field(default=None)
    customer_email: Optional[str] = Field(default=None)
    work_phone: str = Field(sa_column=Column(String(50), nullable=False))
    mobile: Optional[str] = Field(default=None)
    website: Optional[str] = Field(default=None)

    billing_address: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=False),
        description="attention, street1, street2, city, state, pin_code, country, phone, fax",
    )

    customer_type: CustomerType = Field(default=CustomerType.BUSINESS)
    gst_treatment: str = Field(default="Registered Business - Regular")
    place_of_supply: Optional[str] = Field(default=None)
    tax_preference: str = Field(default="Taxable")
    currency: str = Field(default="INR")
    payment_terms: Optional[str] = Field(default=None)
    enable_portal: bool = Field(default=False)
    portal_language: str = Field(default="English")
    gst_in: Optional[str] = Field(default=None)
    pan_number: Optional[str] = Field(default=None)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
