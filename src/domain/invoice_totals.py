"""Totals Calculator

Pure recomputation of invoice totals from line items and the two
user-controlled header amounts.
"""

from decimal import Decimal
from typing import Iterable, Union
from pydantic import BaseModel, ConfigDict, computed_field
from src.domain.base import quantize_amount
from src.domain.invoice import InvoiceStatus
from src.domain.line_item import LineItem

ZERO = Decimal("0")

Amount = Union[Decimal, int, str, float]


def to_decimal(value: Amount) -> Decimal:
    """Coerce user input to a Decimal at the stored scale; floats keep their printed value"""
    if isinstance(value, float):
        value = str(value)
    return quantize_amount(Decimal(value))


class InvoiceTotals(BaseModel):
    """
    Invoice totals

    Invariants:
    - total = subtotal + cgst_total + sgst_total - discount_total + adjustment
    - balance_amount = total - paid_amount
    - status = CREDIT iff balance_amount > 0
    """

    model_config = ConfigDict(frozen=True)

    subtotal: Decimal = ZERO
    discount_total: Decimal = ZERO
    cgst_total: Decimal = ZERO
    sgst_total: Decimal = ZERO
    adjustment: Decimal = ZERO
    total: Decimal = ZERO
    paid_amount: Decimal = ZERO
    balance_amount: Decimal = ZERO

    @computed_field
    @property
    def status(self) -> InvoiceStatus:
        return InvoiceStatus.CREDIT if self.balance_amount > 0 else InvoiceStatus.PAID


def calculate_totals(
    items: Iterable[LineItem],
    adjustment: Amount = ZERO,
    paid_amount: Amount = ZERO,
) -> InvoiceTotals:
    """
    Recompute totals for the given items

    Deterministic and side-effect free, so calling it again on the same
    inputs always yields an equal result.
    """
    adjustment = to_decimal(adjustment)
    paid_amount = to_decimal(paid_amount)

    subtotal = ZERO
    discount_total = ZERO
    cgst_total = ZERO
    sgst_total = ZERO
    for item in items:
        subtotal += item.line_total
        discount_total += item.discount
        cgst_total += item.cgst_amount
        sgst_total += item.sgst_amount

    total = subtotal + cgst_total + sgst_total - discount_total + adjustment

    return InvoiceTotals(
        subtotal=subtotal,
        discount_total=discount_total,
        cgst_total=cgst_total,
        sgst_total=sgst_total,
        adjustment=adjustment,
        total=total,
        paid_amount=paid_amount,
        balance_amount=total - paid_amount,
    )
