"""Tests for the input validators and the item model."""
import pytest
from pydantic import ValidationError

from inventory_tracker.models import InventoryItem, is_valid_category
from inventory_tracker.validation import (
    MAX_DIGITS,
    validate_category,
    validate_item_id,
    validate_price,
    validate_quantity,
    validate_sort_order,
)


class TestNumericValidators:
    """Quantity and price accept plain digits only."""

    @pytest.mark.parametrize("text", ["abc", "-3", "2.5", "", "  ", "1e3", "+4", "٣"])
    def test_rejects_non_digits(self, text):
        assert validate_quantity(text).ok is False
        assert validate_price(text).ok is False

    def test_quantity_value_is_int(self):
        result = validate_quantity(" 12 ")
        assert result.ok is True
        assert result.value == 12
        assert isinstance(result.value, int)

    def test_price_value_is_float(self):
        result = validate_price("9")
        assert result.ok is True
        assert result.value == 9.0
        assert isinstance(result.value, float)

    def test_zero_is_valid(self):
        assert validate_quantity("0").value == 0
        assert validate_price("0").value == 0.0

    def test_overlong_quantity_rejected(self):
        """Digits beyond int conversion limits are a failure, not an exception."""
        result = validate_quantity("9" * 5000)
        assert result.ok is False
        assert "Quantity" in result.reason

    def test_digit_limit_boundary(self):
        assert validate_quantity("9" * MAX_DIGITS).value == int("9" * MAX_DIGITS)
        assert validate_quantity("9" * (MAX_DIGITS + 1)).ok is False

    def test_infinite_price_rejected(self):
        """A price too large for a float would become inf."""
        result = validate_price("9" * 400)
        assert result.ok is False
        assert "Price" in result.reason

    def test_failure_reason_names_field(self):
        assert "Quantity" in validate_quantity("x").reason
        assert "Price" in validate_price("x").reason


class TestCategoryValidator:

    def test_case_insensitive(self):
        result = validate_category("Entertainment")
        assert result.ok is True
        assert result.value == "entertainment"

    def test_unknown_category(self):
        result = validate_category("garden")
        assert result.ok is False
        assert result.reason == "Category garden does not exist!"

    def test_is_valid_category(self):
        assert is_valid_category("CLOTHING")
        assert not is_valid_category("clothes")


class TestOtherValidators:

    def test_item_id_uppercased(self):
        assert validate_item_id(" ab1 ").value == "AB1"

    def test_empty_item_id(self):
        assert validate_item_id("   ").ok is False

    @pytest.mark.parametrize("text,expected", [
        ("1", "ascending"),
        ("ASC", "ascending"),
        ("2", "descending"),
        ("Descending", "descending"),
    ])
    def test_sort_order(self, text, expected):
        assert validate_sort_order(text).value == expected

    def test_invalid_sort_order(self):
        assert validate_sort_order("3").ok is False


class TestInventoryItem:
    """Tests for the InventoryItem model."""

    def test_normalization(self):
        item = InventoryItem(id="ab1", name="Mixed Case", quantity=1, price=2, category="Clothing")
        assert item.id == "AB1"
        assert item.name == "Mixed Case"
        assert item.category == "clothing"

    def test_invalid_category(self):
        with pytest.raises(ValidationError):
            InventoryItem(id="x", name="y", quantity=1, price=1, category="toys")

    def test_update_returns_old_value(self):
        item = InventoryItem(id="x", name="y", quantity=1, price=1, category="clothing")
        assert item.update_quantity(8) == 1
        assert item.update_price(3.5) == 1.0
        assert item.quantity == 8
        assert item.price == 3.5

    def test_infinite_price_rejected(self):
        with pytest.raises(ValidationError):
            InventoryItem(id="x", name="y", quantity=1, price=float("inf"), category="clothing")

    def test_negative_assignment_rejected(self):
        item = InventoryItem(id="x", name="y", quantity=1, price=1, category="clothing")
        with pytest.raises(ValidationError):
            item.update_quantity(-1)
        assert item.quantity == 1
