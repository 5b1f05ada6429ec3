"""Display helpers for amounts and dates (en-GB conventions)."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from .time import ensure_utc

CURRENCY_SYMBOL = "£"


def format_amount(pence: int) -> str:
    """Render an amount held in pence as pounds, e.g. ``12345`` -> ``£123.45``.

    The sign precedes the currency symbol (``-1`` -> ``-£0.01``).
    """

    pounds = Decimal(abs(pence)).scaleb(-2)
    sign = "-" if pence < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{pounds:,.2f}"


def format_date(value: date | str) -> str:
    if isinstance(value, str):
        value = date.fromisoformat(value)
    return value.strftime("%d/%m/%Y")


def format_date_range(start: date | str, end: date | str) -> str:
    return f"{format_date(start)} - {format_date(end)}"


def format_timestamp(value: datetime) -> str:
    return ensure_utc(value).strftime("%d/%m/%Y, %H:%M:%S")


__all__ = [
    "CURRENCY_SYMBOL",
    "format_amount",
    "format_date",
    "format_date_range",
    "format_timestamp",
]
