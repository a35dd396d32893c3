"""Shared parsing utilities for ledger ingestion."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation

from marina.domain.errors import MalformedRecord


def parse_int(value: str, label: str) -> int:
    s = value.strip()
    try:
        return int(s)
    except ValueError:
        raise MalformedRecord(f"{label} is not an integer: {value!r}") from None


def parse_decimal(value: str, label: str = "Amount") -> Decimal:
    """Parse decimal text such as ``1200.5`` or ``$1,200.50``.

    Blank text, ``NaN`` and infinities are rejected rather than defaulted.
    """
    s = value.strip()
    for ch in ["$", " "]:
        s = s.replace(ch, "")
    if not s:
        raise MalformedRecord(f"{label} is missing")
    try:
        result = Decimal(s)
    except InvalidOperation:
        raise MalformedRecord(f"{label} is not a number: {value!r}") from None
    if not result.is_finite():
        raise MalformedRecord(f"{label} is not a finite number: {value!r}")
    return result
