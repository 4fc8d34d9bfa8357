"""
Display formatting for money and dates.

Only views and renderers call these; every computed value stays
unrounded until it reaches here.
"""

from datetime import date

from signcrm.config.settings import CurrencySettings, get_settings

NOT_AVAILABLE = "N/A"


def format_currency(amount: float, currency: CurrencySettings | None = None) -> str:
    """'£1,234.50' style, minus sign ahead of the symbol for negatives."""
    if currency is None:
        currency = get_settings().currency
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency.symbol}{abs(amount):,.{currency.decimals}f}"


def format_percentage(value: float, signed: bool = False) -> str:
    """One decimal place; ``signed`` adds '+' to non-negative values."""
    prefix = "+" if signed and value >= 0 else ""
    return f"{prefix}{value:.1f}%"


def format_date(value: date | None, long: bool = False) -> str:
    """'Oct 15, 2023' (or '15 October 2023' when ``long``); 'N/A' when unset."""
    if value is None:
        return NOT_AVAILABLE
    if long:
        return f"{value.day} {value.strftime('%B %Y')}"
    return f"{value.strftime('%b')} {value.day}, {value.year}"
