"""
Small pure helpers used by the scoring rules.
"""
from __future__ import annotations

import datetime as dt
from decimal import Decimal, InvalidOperation

from app.receipts.errors import ReceiptParseError


def parse_amount(text: str, field: str = "amount") -> Decimal:
    """Parse a currency string such as ``"35.35"`` into a ``Decimal``.

    Raises ``ReceiptParseError`` for anything that is not a finite decimal.
    """
    try:
        value = Decimal(text.strip())
    except (InvalidOperation, AttributeError):
        raise ReceiptParseError(field, text) from None
    if not value.is_finite():
        raise ReceiptParseError(field, text)
    return value


def combine_purchase_moment(purchase_date: dt.date, purchase_time: dt.time) -> dt.datetime:
    return dt.datetime.combine(purchase_date, purchase_time)


def round_up(value: Decimal) -> int:
    """Drop the fraction and add one; whole values round up as well (2.0 -> 3)."""
    return int(value) + 1
