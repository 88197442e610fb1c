"""Unit tests for the totals calculator"""

import random
from decimal import Decimal
from src.domain.invoice import InvoiceStatus
from src.domain.invoice_totals import calculate_totals
from src.domain.line_item import LineItem


def _item(**fields):
    data = {"name": "Item", "quantity": 1, "rate": Decimal("0")}
    data.update(fields)
    return LineItem(**data)


def _scenario_item():
    return _item(
        quantity=2,
        rate=Decimal("100"),
        discount=Decimal("10"),
        cgst_percent=Decimal("2.5"),
        sgst_percent=Decimal("2.5"),
    )


class TestTotalsScenarios:
    """Worked examples"""

    def test_single_item_unpaid_is_credit(self):
        """
        Given: one item 2 x 100, discount 10, CGST 2.5%, SGST 2.5%
        When: totals are calculated with nothing paid
        Then: total 200, balance 200, status CREDIT
        """
        totals = calculate_totals([_scenario_item()])

        assert totals.subtotal == Decimal("200")
        assert totals.cgst_total == Decimal("5")
        assert totals.sgst_total == Decimal("5")
        assert totals.discount_total == Decimal("10")
        assert totals.total == Decimal("200")
        assert totals.balance_amount == Decimal("200")
        assert totals.status == InvoiceStatus.CREDIT

    def test_single_item_fully_paid_is_paid(self):
        totals = calculate_totals([_scenario_item()], paid_amount=Decimal("200"))

        assert totals.balance_amount == Decimal("0")
        assert totals.status == InvoiceStatus.PAID

    def test_no_items_total_is_adjustment(self):
        totals = calculate_totals([], adjustment=Decimal("50"), paid_amount=Decimal("20"))

        assert totals.subtotal == Decimal("0")
        assert totals.total == Decimal("50")
        assert totals.balance_amount == Decimal("30")


class TestTotalsProperties:

    def test_sums_do_not_depend_on_item_order(self):
        # Arrange
        rng = random.Random(42)
        items = [
            _item(
                quantity=rng.randint(0, 20),
                rate=Decimal(rng.randint(0, 100000)) / 100,
                discount=Decimal(rng.randint(0, 500)) / 100,
                cgst_percent=Decimal(rng.choice(["0", "2.5", "6", "9", "14"])),
                sgst_percent=Decimal(rng.choice(["0", "2.5", "6", "9", "14"])),
            )
            for _ in range(25)
        ]
        shuffled = list(items)
        rng.shuffle(shuffled)

        # Act
        forward = calculate_totals(items)
        backward = calculate_totals(list(reversed(items)))
        mixed = calculate_totals(shuffled)

        # Assert
        assert forward == backward == mixed
        assert forward.subtotal == sum((i.quantity * i.rate for i in items), Decimal("0"))

    def test_recalculation_is_idempotent(self):
        items = [_scenario_item(), _item(quantity=3, rate=Decimal("19.99"), cgst_percent=Decimal("9"))]

        assert calculate_totals(items, Decimal("-1.5"), Decimal("10")) == calculate_totals(
            items, Decimal("-1.5"), Decimal("10")
        )

    def test_total_identity_holds(self):
        items = [_scenario_item(), _item(quantity=5, rate=Decimal("12.40"), sgst_percent=Decimal("6"))]

        totals = calculate_totals(items, adjustment=Decimal("-3.25"), paid_amount=Decimal("40"))

        assert totals.total == (
            totals.subtotal + totals.cgst_total + totals.sgst_total - totals.discount_total + totals.adjustment
        )
        assert totals.balance_amount == totals.total - totals.paid_amount

    def test_negative_adjustment_reduces_total(self):
        totals = calculate_totals([_scenario_item()], adjustment=Decimal("-25"))

        assert totals.total == Decimal("175")

    def test_overpayment_gives_negative_balance_and_paid(self):
        totals = calculate_totals([_scenario_item()], paid_amount=Decimal("250"))

        assert totals.balance_amount == Decimal("-50")
        assert totals.status == InvoiceStatus.PAID

    def test_status_boundary(self):
        just_owing = calculate_totals([], adjustment=Decimal("0.01"))
        settled = calculate_totals([], adjustment=Decimal("0.01"), paid_amount=Decimal("0.01"))

        assert just_owing.status == InvoiceStatus.CREDIT
        assert settled.status == InvoiceStatus.PAID

    def test_float_inputs_keep_their_printed_value(self):
        totals = calculate_totals([], adjustment=0.1, paid_amount=0.3)

        assert totals.adjustment == Decimal("0.1")
        assert totals.balance_amount == Decimal("-0.2")

    def test_header_amounts_are_held_at_six_places(self):
        totals = calculate_totals([], adjustment=Decimal("100.0000004"), paid_amount=Decimal("100"))

        assert totals.adjustment == Decimal("100")
        assert totals.balance_amount == Decimal("0")
        assert totals.status == InvoiceStatus.PAID
