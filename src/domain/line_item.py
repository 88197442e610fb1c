"""Line Item Model

A single invoice line. ``amount`` is derived from the other fields and is
never accepted as input.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from src.domain.base import generate_uuid, quantize_amount

if TYPE_CHECKING:
    from src.domain.product import Product

HUNDRED = Decimal("100")

EDITABLE_FIELDS = frozenset({
    "product_id",
    "name",
    "hsn_code",
    "quantity",
    "rate",
    "discount",
    "cgst_percent",
    "sgst_percent",
})


class InvalidLineItem(ValueError):
    """Raised when a line item edit touches a derived or unknown field"""


class LineItem(BaseModel):
    """
    Invoice line item

    Computation:
    - line_total = quantity * rate
    - cgst_amount = line_total * cgst_percent / 100
    - sgst_amount = line_total * sgst_percent / 100
    - amount = line_total + cgst_amount + sgst_amount - discount
    - inputs and derived amounts are rounded half-up to 6 decimal places

    Items are immutable; edits go through replace(), which validates the
    new field values and yields a fresh item with its amount recomputed.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(default_factory=generate_uuid)
    product_id: Optional[str] = None
    name: str = Field(..., min_length=1)
    hsn_code: str = ""
    quantity: int = Field(default=1, ge=0)
    rate: Decimal = Field(default=Decimal("0"), ge=0)
    discount: Decimal = Field(default=Decimal("0"), ge=0, description="Absolute amount, not a percentage")
    cgst_percent: Decimal = Field(default=Decimal("0"), ge=0)
    sgst_percent: Decimal = Field(default=Decimal("0"), ge=0)

    @field_validator("rate", "discount", "cgst_percent", "sgst_percent")
    @classmethod
    def round_to_stored_scale(cls, v):
        return quantize_amount(v)

    @property
    def line_total(self) -> Decimal:
        return quantize_amount(self.quantity * self.rate)

    @property
    def cgst_amount(self) -> Decimal:
        return quantize_amount(self.line_total * self.cgst_percent / HUNDRED)

    @property
    def sgst_amount(self) -> Decimal:
        return quantize_amount(self.line_total * self.sgst_percent / HUNDRED)

    @computed_field
    @property
    def amount(self) -> Decimal:
        return self.line_total + self.cgst_amount + self.sgst_amount - self.discount

    def replace(self, **changes) -> "LineItem":
        """Return a copy with whole fields replaced"""
        rejected = set(changes) - EDITABLE_FIELDS
        if rejected:
            raise InvalidLineItem(f"Fields cannot be edited: {', '.join(sorted(rejected))}")
        data = self.model_dump(exclude={"amount"})
        data.update(changes)
        return LineItem.model_validate(data)

    @classmethod
    def from_product(cls, product: "Product", quantity: int = 1) -> "LineItem":
        """Build a line from a catalog product, splitting its GST rate evenly"""
        half_tax = Decimal(product.tax_percent or 0) / 2
        return cls(
            product_id=product.id,
            name=product.name,
            hsn_code=product.sku or "",
            quantity=quantity,
            rate=product.unit_price or Decimal("0"),
            cgst_percent=half_tax,
            sgst_percent=half_tax,
        )
