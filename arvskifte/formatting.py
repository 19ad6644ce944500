"""Visningsformat enligt sv-SE. Avrundning sker bara här, aldrig i beräkningen."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from .models import to_decimal

TWOPLACES = Decimal("0.01")
NBSP = "\u00a0"


def _swedish_number(text: str) -> str:
    # 1,234,567.50 -> 1 234 567,50
    return text.replace(",", NBSP).replace(".", ",")


def format_sek(value) -> str:
    """
    Formats an amount the way the browser's sv-SE locale does, followed by 'kr'.
    Example: 1234567.5 -> '1 234 567,5 kr' (non-breaking space between groups)
    """
    amount = to_decimal(value, "amount").quantize(TWOPLACES, rounding=ROUND_HALF_UP)
    text = _swedish_number(f"{amount:,.2f}")
    text = text.rstrip("0").rstrip(",")
    return f"{text} kr"


def format_percent(value) -> str:
    pct = to_decimal(value, "percentage").normalize()
    return f"{_swedish_number(format(pct, 'f'))}%"
