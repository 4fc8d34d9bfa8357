"""Unit tests for financial entities."""

import pytest
from pydantic import ValidationError

from signcrm.core.entities.financials import FixedCostItem, MonthlyFinancials


class TestFixedCostItem:
    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            FixedCostItem(name="Rent", monthly_amount=-1)

    @pytest.mark.parametrize(("raw", "expected"), [("3,500", 3500.0), ("nan", 0.0), (None, 0.0)])
    def test_amount_coerced_like_form_input(self, raw, expected):
        assert FixedCostItem(name="Rent", monthly_amount=raw).monthly_amount == expected


class TestMonthlyFinancials:
    def test_month_range(self):
        with pytest.raises(ValidationError):
            MonthlyFinancials(month=13, year=2023)

    def test_is_profitable(self):
        assert MonthlyFinancials(month=1, year=2024, profit=10).is_profitable
        assert not MonthlyFinancials(month=1, year=2024, profit=-10).is_profitable
