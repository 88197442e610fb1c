"""Product Domain Entity

Catalog of goods and services a tenant sells.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String
from src.domain.base import (
    AMOUNT_DIGITS,
    AMOUNT_PLACES,
    BaseModel,
    generate_uuid,
    timestamp_column,
    utc_now,
)


class ProductType(str, Enum):
    PRODUCT = "product"
    SERVICE = "service"


class Product(BaseModel, table=True):
    """
    Product - A sellable product or service line

    Domain Rules:
    - sku is unique across the whole table, not only within a tenant
    - tax_percent is the combined GST rate, split evenly into CGST/SGST on invoices
    """

    __tablename__ = "products"
    __table_args__ = (
        Index("ix_products_tenant_id", "tenant_id"),
        Index("ix_products_sku", "sku", unique=True),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str = Field(description="Owning tenant")
    user_id: str = Field(description="Principal that created the product")

    name: str = Field(sa_column=Column(String(255), nullable=False))
    description: Optional[str] = Field(default=None)
    sku: str = Field(sa_column=Column(String(50), nullable=False))
    product_type: ProductType = Field(default=ProductType.PRODUCT)

    unit_price: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(AMOUNT_DIGITS, AMOUNT_PLACES), nullable=False),
    )
    tax_percent: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(AMOUNT_DIGITS, AMOUNT_PLACES), nullable=False),
        description="Combined GST percentage",
    )
    discount: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(AMOUNT_DIGITS, AMOUNT_PLACES), nullable=True),
    )

    unit: str = Field(default="pcs")
    stock_quantity: Optional[int] = Field(default=None)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
