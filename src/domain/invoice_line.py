"""Invoice Line Domain Entity

Persisted form of a LineItem.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String
from src.domain.base import AMOUNT_DIGITS, AMOUNT_PLACES, BaseModel
from src.domain.line_item import LineItem


def _decimal_column() -> Column:
    return Column(Numeric(AMOUNT_DIGITS, AMOUNT_PLACES), nullable=False, default=0)


class InvoiceLine(BaseModel, table=True):
    """
    Invoice Line - One row per line item, ordered by position

    Domain Rules:
    - Each line belongs to exactly one invoice
    - amount is a snapshot of LineItem.amount at save time
    """

    __tablename__ = "invoice_lines"
    __table_args__ = (
        Index("ix_invoice_lines_invoice_id", "invoice_id"),
    )

    row_id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
    )
    invoice_id: str = Field(
        sa_column=Column(String, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
    )
    position: int = Field(sa_column=Column(Integer, nullable=False))

    item_id: str = Field(description="LineItem.id, stable across edits")
    product_id: Optional[str] = Field(default=None)
    name: str = Field(sa_column=Column(String(255), nullable=False))
    hsn_code: str = Field(default="")
    quantity: int = Field(sa_column=Column(Integer, nullable=False))
    rate: Decimal = Field(sa_column=_decimal_column())
    discount: Decimal = Field(sa_column=_decimal_column())
    cgst_percent: Decimal = Field(sa_column=_decimal_column())
    sgst_percent: Decimal = Field(sa_column=_decimal_column())
    amount: Decimal = Field(sa_column=_decimal_column())

    @classmethod
    def from_line_item(cls, invoice_id: str, position: int, item: LineItem) -> "InvoiceLine":
        return cls(
            invoice_id=invoice_id,
            position=position,
            item_id=item.id,
            product_id=item.product_id,
            name=item.name,
            hsn_code=item.hsn_code,
            quantity=item.quantity,
            rate=item.rate,
            discount=item.discount,
            cgst_percent=item.cgst_percent,
            sgst_percent=item.sgst_percent,
            amount=item.amount,
        )

    def to_line_item(self) -> LineItem:
        """Rebuild the domain item; amount is recomputed rather than read back"""
        return LineItem(
            id=self.item_id,
            product_id=self.product_id,
            name=self.name,
            hsn_code=self.hsn_code,
            quantity=self.quantity,
            rate=self.rate,
            discount=self.discount,
            cgst_percent=self.cgst_percent,
            sgst_percent=self.sgst_percent,
        )
