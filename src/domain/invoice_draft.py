"""Invoice Draft

In-memory working copy of an invoice. All item and amount edits go through
this aggregate so totals are recomputed after every change.
"""

from datetime import date
from typing import List, Optional, Sequence
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine
from src.domain.invoice_totals import Amount, InvoiceTotals, ZERO, calculate_totals, to_decimal
from src.domain.line_item import LineItem


class LineItemNotFound(LookupError):
    def __init__(self, item_id: str):
        super().__init__(f"Line item {item_id} not found")
        self.item_id = item_id


class InvoiceDraft:
    """
    Invoice being edited

    Domain Rules:
    - Items keep their insertion order
    - totals is recomputed by every mutating method and is read-only
    - adjustment may be negative; paid_amount may exceed the total
    """

    def __init__(
        self,
        customer_id: Optional[str] = None,
        invoice_number: Optional[str] = None,
        order_number: Optional[str] = None,
        invoice_date: Optional[date] = None,
        due_date: Optional[date] = None,
        terms_and_conditions: Optional[str] = None,
        remarks: Optional[str] = None,
        items: Sequence[LineItem] = (),
        adjustment: Amount = ZERO,
        paid_amount: Amount = ZERO,
        invoice_id: Optional[str] = None,
    ):
        self.invoice_id = invoice_id
        self.customer_id = customer_id
        self.invoice_number = invoice_number
        self.order_number = order_number
        self.invoice_date = invoice_date
        self.due_date = due_date
        self.terms_and_conditions = terms_and_conditions
        self.remarks = remarks
        self._items: List[LineItem] = list(items)
        self._adjustment = to_decimal(adjustment)
        self._paid_amount = to_decimal(paid_amount)
        self._totals = self._recompute()

    @property
    def items(self) -> List[LineItem]:
        return list(self._items)

    @property
    def totals(self) -> InvoiceTotals:
        return self._totals

    @property
    def is_new(self) -> bool:
        return self.invoice_id is None

    def add_item(self, item: LineItem) -> LineItem:
        self._items.append(item)
        self._totals = self._recompute()
        return item

    def replace_item(self, item_id: str, **fields) -> LineItem:
        index = self._index_of(item_id)
        updated = self._items[index].replace(**fields)
        self._items[index] = updated
        self._totals = self._recompute()
        return updated

    def remove_item(self, item_id: str) -> LineItem:
        removed = self._items.pop(self._index_of(item_id))
        self._totals = self._recompute()
        return removed

    def set_adjustment(self, adjustment: Amount) -> None:
        self._adjustment = to_decimal(adjustment)
        self._totals = self._recompute()

    def set_paid_amount(self, paid_amount: Amount) -> None:
        self._paid_amount = to_decimal(paid_amount)
        self._totals = self._recompute()

    def _index_of(self, item_id: str) -> int:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        raise LineItemNotFound(item_id)

    def _recompute(self) -> InvoiceTotals:
        return calculate_totals(self._items, self._adjustment, self._paid_amount)

    @classmethod
    def from_invoice(cls, invoice: Invoice, lines: Sequence[InvoiceLine]) -> "InvoiceDraft":
        ordered = sorted(lines, key=lambda line: line.position)
        return cls(
            invoice_id=invoice.id,
            customer_id=invoice.customer_id,
            invoice_number=invoice.invoice_number,
            order_number=invoice.order_number,
            invoice_date=invoice.invoice_date,
            due_date=invoice.due_date,
            terms_and_conditions=invoice.terms_and_conditions,
            remarks=invoice.remarks,
            items=[line.to_line_item() for line in ordered],
            adjustment=invoice.adjustment,
            paid_amount=invoice.paid_amount,
        )

    def apply_to(self, invoice: Invoice) -> Invoice:
        """Copy header fields and computed totals onto a persistent Invoice"""
        invoice.customer_id = self.customer_id
        invoice.invoice_number = self.invoice_number
        invoice.order_number = self.order_number
        invoice.invoice_date = self.invoice_date
        invoice.due_date = self.due_date
        invoice.terms_and_conditions = self.terms_and_conditions
        invoice.remarks = self.remarks

        totals = self._totals
        invoice.subtotal = totals.subtotal
        invoice.discount = totals.discount_total
        invoice.cgst = totals.cgst_total
        invoice.sgst = totals.sgst_total
        invoice.adjustment = totals.adjustment
        invoice.total = totals.total
        invoice.paid_amount = totals.paid_amount
        invoice.balance_amount = totals.balance_amount
        return invoice

    def to_lines(self, invoice_id: str) -> List[InvoiceLine]:
        return [
            InvoiceLine.from_line_item(invoice_id, position, item)
            for position, item in enumerate(self._items)
        ]
