"""Unit tests for LineItem domain model"""

import pytest
from decimal import Decimal
from pydantic import ValidationError
from src.domain.line_item import InvalidLineItem, LineItem
from src.domain.product import Product, ProductType


class TestLineItemAmount:
    """Test the derived amount of a line item"""

    def test_amount_adds_both_taxes_and_subtracts_discount(self):
        """Test amount = qty*rate + cgst + sgst - discount"""
        # Arrange
        item = LineItem(
            name="Steel pipe",
            quantity=2,
            rate=Decimal("100"),
            discount=Decimal("10"),
            cgst_percent=Decimal("2.5"),
            sgst_percent=Decimal("2.5"),
        )

        # Assert
        assert item.line_total == Decimal("200")
        assert item.cgst_amount == Decimal("5")
        assert item.sgst_amount == Decimal("5")
        assert item.amount == Decimal("200")

    def test_amount_is_stable_across_recomputation(self):
        """Test reading amount twice on unchanged inputs gives the same value"""
        item = LineItem(
            name="Consulting",
            quantity=3,
            rate=Decimal("333.33"),
            cgst_percent=Decimal("9"),
            sgst_percent=Decimal("9"),
        )

        assert item.amount == item.amount
        assert LineItem.model_validate(item.model_dump()).amount == item.amount

    def test_supplied_amount_is_ignored(self):
        """Test an amount sent as input never overrides the computed one"""
        item = LineItem.model_validate(
            {"name": "Bolt", "quantity": 1, "rate": "10", "amount": "9999"}
        )

        assert item.amount == Decimal("10")

    def test_decimal_arithmetic_has_no_float_drift(self):
        """Test 0.1 + 0.2 style inputs add up exactly"""
        item = LineItem(name="Washer", quantity=3, rate=Decimal("0.1"))

        assert item.amount == Decimal("0.3")


class TestLineItemValidation:
    """Test LineItem validation rules"""

    @pytest.mark.parametrize(
        "field,value",
        [
            ("quantity", -1),
            ("rate", Decimal("-0.01")),
            ("discount", Decimal("-5")),
            ("cgst_percent", Decimal("-1")),
            ("sgst_percent", Decimal("-1")),
        ],
    )
    def test_negative_values_raise_validation_error(self, field, value):
        with pytest.raises(ValidationError):
            LineItem(name="Item", **{field: value})

    def test_blank_name_raises_validation_error(self):
        with pytest.raises(ValidationError):
            LineItem(name="")


class TestLineItemReplace:
    """Test whole-field replacement"""

    def test_replace_returns_new_item_with_recomputed_amount(self):
        # Arrange
        item = LineItem(name="Pipe", quantity=1, rate=Decimal("100"))

        # Act
        updated = item.replace(quantity=4)

        # Assert
        assert updated.id == item.id
        assert updated.amount == Decimal("400")
        assert item.amount == Decimal("100")

    def test_replace_rejects_amount(self):
        item = LineItem(name="Pipe", quantity=1, rate=Decimal("100"))

        with pytest.raises(InvalidLineItem):
            item.replace(amount=Decimal("1"))

    def test_replace_rejects_id(self):
        item = LineItem(name="Pipe")

        with pytest.raises(InvalidLineItem):
            item.replace(id="other")

    def test_replace_validates_new_values(self):
        item = LineItem(name="Pipe")

        with pytest.raises(ValidationError):
            item.replace(quantity=-3)


class TestLineItemFromProduct:

    def test_from_product_splits_tax_and_uses_sku_as_hsn(self):
        """Test catalog product becomes a line with half the GST on each side"""
        # Arrange
        product = Product(
            id="prod_1",
            tenant_id="tenant_a",
            user_id="tenant_a",
            name="Blue steel pipe",
            sku="BSP-PRD-0427",
            product_type=ProductType.PRODUCT,
            unit_price=Decimal("450"),
            tax_percent=Decimal("18"),
        )

        # Act
        item = LineItem.from_product(product, quantity=2)

        # Assert
        assert item.product_id == "prod_1"
        assert item.name == "Blue steel pipe"
        assert item.hsn_code == "BSP-PRD-0427"
        assert item.rate == Decimal("450")
        assert item.cgst_percent == Decimal("9")
        assert item.sgst_percent == Decimal("9")
        assert item.amount == Decimal("1062")


class TestLineItemScale:
    """Amounts are held at the six decimal places the store keeps"""

    def test_tax_amounts_round_half_up_to_six_places(self):
        item = LineItem(
            name="Solder",
            quantity=1,
            rate=Decimal("0.333333"),
            cgst_percent=Decimal("9"),
            sgst_percent=Decimal("9"),
        )

        assert item.cgst_amount == Decimal("0.030000")
        assert item.amount == Decimal("0.393333")
        assert item.amount.as_tuple().exponent == -6

    def test_inputs_beyond_six_places_are_rounded(self):
        item = LineItem(name="Solder", quantity=1, rate=Decimal("100.0000004"))

        assert item.rate == Decimal("100.000000")
        assert item.amount == Decimal("100")
