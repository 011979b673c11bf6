"""Shared formatting helpers used across the form handlers."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext

from src.config import settings

_CENT = Decimal("0.01")


def format_currency(amount: float, symbol: str = "") -> str:
    """Format an amount as display currency with thousands separators.

    Examples:
        >>> format_currency(3000)
        '$3,000.00'
        >>> format_currency(1234.565)
        '$1,234.57'
        >>> format_currency(float("inf"))
        '$∞'
    """
    symbol = symbol or settings.business.currency_symbol
    value = Decimal(str(amount))
    if not value.is_finite():
        return f"{'-' if value.is_signed() else ''}{symbol}∞"
    with localcontext() as ctx:
        # whole digits plus cents must fit in the context precision
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        value = value.quantize(_CENT, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{value.copy_abs():,.2f}"


def format_long_date(value: date) -> str:
    """Format a calendar date as ``June 10, 2024``."""
    return f"{value:%B} {value.day}, {value.year}"


def clean(value) -> str:
    """Trim a raw form value, treating None as empty."""
    if value is None:
        return ""
    return str(value).strip()
