"""Mini README: Display formatting helpers for the financial tracker.

Kept separate from the interface package so the formatting rules can be
tested without importing the web framework.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal

CENTS = Decimal("0.01")
# Wide enough to quantize the largest finite float to cents.
_CONTEXT = Context(prec=400)


def format_currency(value: float, symbol: str) -> str:
    """Render an amount with two decimals (halves round up) prefixed by the currency glyph."""

    cents = Decimal(repr(value)).quantize(CENTS, rounding=ROUND_HALF_UP, context=_CONTEXT)
    if cents.is_zero():
        cents = abs(cents)
    return f"{symbol}{cents:f}"
