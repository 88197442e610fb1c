"""Data Transfer Objects for Invoice Use Cases

Pydantic models for command inputs and response outputs. Amounts and totals
sent by clients are never read; the server recomputes them.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator
from src.domain.base import AmountInput
from src.domain.invoice import InvoiceStatus
from src.domain.invoice_totals import InvoiceTotals
from src.domain.line_item import LineItem


class LineItemInputDTO(BaseModel):
    """
    Line item as sent by a client

    An ``amount`` key is accepted and ignored.
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    product_id: Optional[str] = None
    name: str = Field(..., min_length=1)
    hsn_code: str = ""
    quantity: int = Field(default=1, ge=0)
    rate: AmountInput = Field(default=Decimal("0"), ge=0)
    discount: AmountInput = Field(default=Decimal("0"), ge=0)
    cgst_percent: AmountInput = Field(default=Decimal("0"), ge=0)
    sgst_percent: AmountInput = Field(default=Decimal("0"), ge=0)

    def to_line_item(self) -> LineItem:
        return LineItem(**self.model_dump(exclude_none=True))


class SaveInvoiceCommandDTO(BaseModel):
    """
    Command DTO for saving an invoice

    Used as input to SaveInvoice use case. Without invoice_id the invoice is
    inserted, otherwise the existing one is overwritten.
    """

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "customer_id": "6c1f7a3e-3a51-4a53-9d0e-4d8c2b1f9e10",
                "invoice_date": "2024-06-10",
                "items": [
                    {
                        "name": "Blue steel pipe",
                        "hsn_code": "BSP-PRD-0427",
                        "quantity": 2,
                        "rate": "500",
                        "cgst_percent": "9",
                        "sgst_percent": "9",
                    }
                ],
                "adjustment": "0",
                "paid_amount": "500",
            }
        },
    )

    invoice_id: Optional[str] = None
    customer_id: str = Field(..., min_length=1)
    invoice_number: Optional[str] = Field(default=None, max_length=50)
    order_number: Optional[str] = None
    invoice_date: Optional[date] = None
    due_date: Optional[date] = None
    terms_and_conditions: Optional[str] = None
    remarks: Optional[str] = None
    items: List[LineItemInputDTO] = Field(default_factory=list)
    adjustment: AmountInput = Field(default=Decimal("0"), description="Signed manual adjustment")
    paid_amount: AmountInput = Field(default=Decimal("0"), ge=0)


class PreviewTotalsCommandDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    items: List[LineItemInputDTO] = Field(default_factory=list)
    adjustment: AmountInput = Decimal("0")
    paid_amount: AmountInput = Field(default=Decimal("0"), ge=0)


class AddInvoiceItemCommandDTO(BaseModel):
    """
    Either product_id (line built from the catalog product) or explicit
    item fields with at least a name.
    """

    model_config = ConfigDict(extra="ignore")

    product_id: Optional[str] = None
    quantity: int = Field(default=1, ge=0)
    name: Optional[str] = Field(default=None, min_length=1)
    hsn_code: str = ""
    rate: AmountInput = Field(default=Decimal("0"), ge=0)
    discount: AmountInput = Field(default=Decimal("0"), ge=0)
    cgst_percent: AmountInput = Field(default=Decimal("0"), ge=0)
    sgst_percent: AmountInput = Field(default=Decimal("0"), ge=0)

    @model_validator(mode="after")
    def product_or_name(self):
        if not self.product_id and not self.name:
            raise ValueError("Either product_id or name is required")
        return self

    def to_line_item(self) -> LineItem:
        return LineItem(**self.model_dump(exclude_none=True))


class ReplaceInvoiceItemCommandDTO(BaseModel):
    """Whole-field replacement of the editable fields present in the request"""

    model_config = ConfigDict(extra="ignore")

    product_id: Optional[str] = None
    name: Optional[str] = Field(default=None, min_length=1)
    hsn_code: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0)
    rate: Optional[AmountInput] = Field(default=None, ge=0)
    discount: Optional[AmountInput] = Field(default=None, ge=0)
    cgst_percent: Optional[AmountInput] = Field(default=None, ge=0)
    sgst_percent: Optional[AmountInput] = Field(default=None, ge=0)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class UpdateAdjustmentsCommandDTO(BaseModel):
    adjustment: Optional[AmountInput] = None
    paid_amount: Optional[AmountInput] = Field(default=None, ge=0)


class LineItemDTO(BaseModel):
    id: str
    product_id: Optional[str] = None
    name: str
    hsn_code: str
    quantity: int
    rate: Decimal
    discount: Decimal
    cgst_percent: Decimal
    sgst_percent: Decimal
    amount: Decimal

    @classmethod
    def from_line_item(cls, item: LineItem) -> "LineItemDTO":
        return cls(**item.model_dump())


class InvoicePreviewDTO(BaseModel):
    items: List[LineItemDTO]
    totals: InvoiceTotals


class InvoiceResponseDTO(BaseModel):
    id: str
    tenant_id: str
    user_id: str
    customer_id: str
    customer_name: Optional[str] = None
    invoice_number: str
    order_number: Optional[str] = None
    invoice_date: date
    due_date: Optional[date] = None
    terms_and_conditions: Optional[str] = None
    remarks: Optional[str] = None
    items: List[LineItemDTO]
    totals: InvoiceTotals
    status: InvoiceStatus
    created_at: datetime
    updated_at: datetime


class InvoiceSummaryDTO(BaseModel):
    """Row of the invoice list"""

    id: str
    invoice_number: str
    customer_id: str
    customer_name: str
    invoice_date: date
    due_date: Optional[date] = None
    total: Decimal
    balance_amount: Decimal
    status: InvoiceStatus


class InvoiceNumberDTO(BaseModel):
    invoice_number: str


class InvoicePdfDTO(BaseModel):
    invoice_number: str
    filename: str
    content: bytes
