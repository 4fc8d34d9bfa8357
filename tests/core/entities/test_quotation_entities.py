"""Unit tests for quotation and catalog entities."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from signcrm.core.entities.catalog import (
    AVAILABLE_CATEGORY_COLORS,
    CostItem,
    CostUnit,
    palette_color,
)
from signcrm.core.entities.numeric import coerce_amount
from signcrm.core.entities.quotation import QuotationDetails, QuotationLineItem


class TestCoerceAmount:
    """Tests for form-input numeric coercion."""

    @pytest.mark.parametrize("raw", [None, "", "abc", "null", "nan"])
    def test_bad_input_becomes_zero(self, raw):
        assert coerce_amount(raw) == 0.0

    def test_numeric_string_parsed(self):
        assert coerce_amount(" 1,250.50 ") == 1250.5

    def test_decimal_to_float(self):
        value = coerce_amount(Decimal("5.5"))
        assert value == 5.5
        assert isinstance(value, float)


class TestQuotationLineItem:
    def test_default_quantity_is_one(self):
        assert QuotationLineItem(item_id="ci-1").quantity == 1.0

    def test_empty_quantity_is_zero(self):
        assert QuotationLineItem(item_id="ci-1", quantity="").quantity == 0.0

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError):
            QuotationLineItem(item_id="ci-1", quantity=-1)


class TestQuotationDetails:
    def test_defaults(self):
        details = QuotationDetails()
        assert details.line_items == []
        assert details.fixed_costs == 0.0
        assert details.profit_markup_percentage == 25.0
        assert details.fixed_cost_contribution_percentage == 15.0

    def test_negative_fixed_costs_rejected(self):
        with pytest.raises(ValidationError):
            QuotationDetails(fixed_costs=-10)

    def test_percentages_are_unbounded(self):
        """A negative markup is a discount; above 100 is allowed too."""
        details = QuotationDetails(
            profit_markup_percentage=-10, fixed_cost_contribution_percentage=250
        )
        assert details.profit_markup_percentage == -10
        assert details.fixed_cost_contribution_percentage == 250

    def test_line_item_order_preserved(self):
        details = QuotationDetails(
            line_items=[{"item_id": "b"}, {"item_id": "a"}, {"item_id": "c"}]
        )
        assert [li.item_id for li in details.line_items] == ["b", "a", "c"]


class TestCostItem:
    def test_unit_values(self):
        assert {u.value for u in CostUnit} == {"item", "sqm", "meter", "hour", "day"}

    def test_cost_coerced_from_string(self):
        item = CostItem(name="Vinyl", cost_per_unit="45", category_id="cat-1")
        assert item.cost_per_unit == 45.0

    def test_cost_blank_or_text_becomes_zero(self):
        for raw in ("", "null", "nan"):
            assert CostItem(name="Vinyl", cost_per_unit=raw, category_id="cat-1").cost_per_unit == 0.0

    def test_negative_cost_rejected(self):
        with pytest.raises(ValidationError):
            CostItem(name="Vinyl", cost_per_unit=-1, category_id="cat-1")


class TestCategoryPalette:
    def test_palette_color_classes(self):
        color = palette_color("Green")
        assert color.bg == "bg-green-50"
        assert color.text == "text-green-700"
        assert color.border == "border-green-200"

    def test_available_colors_include_gray(self):
        assert AVAILABLE_CATEGORY_COLORS["Gray"] == palette_color("gray")
