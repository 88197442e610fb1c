"""Invoice Domain Entity

Invoice header plus the persisted snapshot of its computed totals.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Date, Text, UniqueConstraint
from src.domain.base import (
    AMOUNT_DIGITS,
    AMOUNT_PLACES,
    BaseModel,
    generate_uuid,
    timestamp_column,
    utc_now,
)


class InvoiceStatus(str, Enum):
    """Settlement status, derived from the balance amount"""
    CREDIT = "CREDIT"
    PAID = "PAID"


def _money_column() -> Column:
    return Column(Numeric(AMOUNT_DIGITS, AMOUNT_PLACES), nullable=False, default=0)


class Invoice(BaseModel, table=True):
    """
    Invoice - Tax invoice raised by a tenant against one of its customers

    Domain Rules:
    - invoice_number is unique within a tenant
    - Totals columns are written only from InvoiceTotals, never edited directly
    - status is CREDIT while balance_amount > 0, otherwise PAID
    - Lines live in invoice_lines and are replaced wholesale on save
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index("ix_invoices_tenant_id", "tenant_id"),
        UniqueConstraint("tenant_id", "invoice_number", name="uq_invoices_tenant_number"),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str = Field(description="Owning tenant")
    user_id: str = Field(description="Principal that created the invoice")

    customer_id: str = Field(foreign_key="customers.id", description="Billed customer")
    invoice_number: str = Field(sa_column=Column(String(50), nullable=False))
    order_number: Optional[str] = Field(default=None)
    invoice_date: date = Field(sa_column=Column(Date, nullable=False))
    due_date: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))
    terms_and_conditions: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    remarks: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    subtotal: Decimal = Field(default=Decimal("0"), sa_column=_money_column())
    discount: Decimal = Field(default=Decimal("0"), sa_column=_money_column())
    cgst: Decimal = Field(default=Decimal("0"), sa_column=_money_column())
    sgst: Decimal = Field(default=Decimal("0"), sa_column=_money_column())
    adjustment: Decimal = Field(default=Decimal("0"), sa_column=_money_column())
    total: Decimal = Field(default=Decimal("0"), sa_column=_money_column())
    paid_amount: Decimal = Field(default=Decimal("0"), sa_column=_money_column())
    balance_amount: Decimal = Field(default=Decimal("0"), sa_column=_money_column())

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())

    @property
    def status(self) -> InvoiceStatus:
        return InvoiceStatus.CREDIT if self.balance_amount > 0 else InvoiceStatus.PAID
