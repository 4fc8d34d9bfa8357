"""Unit tests for display formatting."""

from datetime import date

from signcrm.config.settings import CurrencySettings
from signcrm.core.formatting import format_currency, format_date, format_percentage


class TestFormatCurrency:
    def test_pounds_with_grouping(self):
        assert format_currency(5872.5) == "£5,872.50"

    def test_zero(self):
        assert format_currency(0) == "£0.00"

    def test_negative_prefixed_with_minus(self):
        assert format_currency(-1400) == "-£1,400.00"

    def test_rounds_to_two_decimals(self):
        assert format_currency(1234.567) == "£1,234.57"

    def test_custom_currency(self):
        euro = CurrencySettings(code="EUR", symbol="€", decimals=0)
        assert format_currency(1234.4, euro) == "€1,234"

    def test_symbol_from_env(self, monkeypatch):
        monkeypatch.setenv("CURRENCY_SYMBOL", "$")
        from signcrm.config import reset_settings

        reset_settings()
        assert format_currency(10) == "$10.00"


class TestFormatPercentage:
    def test_signed(self):
        assert format_percentage(100, signed=True) == "+100.0%"
        assert format_percentage(-12.34, signed=True) == "-12.3%"

    def test_unsigned(self):
        assert format_percentage(15) == "15.0%"


class TestFormatDate:
    def test_none_is_na(self):
        assert format_date(None) == "N/A"

    def test_short(self):
        assert format_date(date(2023, 10, 5)) == "Oct 5, 2023"

    def test_long(self):
        assert format_date(date(2023, 10, 5), long=True) == "5 October 2023"
