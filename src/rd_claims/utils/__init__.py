"""Utility helpers."""

from .formatting import format_amount, format_date, format_date_range, format_timestamp
from .time import ensure_utc

__all__ = [
    "ensure_utc",
    "format_amount",
    "format_date",
    "format_date_range",
    "format_timestamp",
]
