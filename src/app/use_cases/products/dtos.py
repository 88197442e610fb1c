"""Data Transfer Objects for Product Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator
from src.domain.base import AmountInput
from src.domain.product import ProductType


class CreateProductCommandDTO(BaseModel):
    """
    Command DTO for creating a product

    A blank sku is generated from the name and product type.
    """

    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    sku: Optional[str] = Field(default=None, max_length=50)
    product_type: ProductType = ProductType.PRODUCT
    unit_price: AmountInput = Field(..., ge=0)
    tax_percent: AmountInput = Field(default=Decimal("0"), ge=0, le=100, description="Combined GST percentage")
    discount: Optional[AmountInput] = Field(default=None, ge=0)
    unit: str = Field(default="pcs", min_length=1)
    stock_quantity: Optional[int] = Field(default=None, ge=0)
    is_active: bool = True

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Blue steel pipe",
                "product_type": "product",
                "unit_price": "450.00",
                "tax_percent": "18",
                "unit": "pcs",
                "stock_quantity": 120,
            }
        }
    )


class UpdateProductCommandDTO(BaseModel):
    """Typed partial update; only fields present in the request are applied"""

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    sku: Optional[str] = Field(default=None, min_length=1, max_length=50)
    product_type: Optional[ProductType] = None
    unit_price: Optional[AmountInput] = Field(default=None, ge=0)
    tax_percent: Optional[AmountInput] = Field(default=None, ge=0, le=100)
    discount: Optional[AmountInput] = Field(default=None, ge=0)
    unit: Optional[str] = Field(default=None, min_length=1)
    stock_quantity: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None

    @model_validator(mode="after")
    def required_fields_not_cleared(self):
        for name in ("name", "sku", "product_type", "unit_price", "tax_percent", "unit", "is_active"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be cleared")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ProductResponseDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    tenant_id: str
    user_id: str
    name: str
    description: Optional[str] = None
    sku: str
    product_type: ProductType
    unit_price: Decimal
    tax_percent: Decimal
    discount: Optional[Decimal] = None
    unit: str
    stock_quantity: Optional[int] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class SkuResponseDTO(BaseModel):
    sku: str
