"""Lenient number parsing for amounts typed into forms."""

from decimal import Decimal
from typing import Any


def coerce_amount(v: Any) -> float:
    """Convert None/empty/invalid form input to 0.0."""
    if v is None or v == "":
        return 0.0
    if isinstance(v, (bool, int, float, Decimal)):
        return float(v)
    try:
        s = str(v).strip().replace(",", "")
        if s.lower() in {"none", "nan", "null", ""}:
            return 0.0
        return float(s)
    except (ValueError, TypeError, AttributeError):
        return 0.0
