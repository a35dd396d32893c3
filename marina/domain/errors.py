"""Error taxonomy shared by the marina domain and its adapters."""
from __future__ import annotations

from decimal import Decimal
from pathlib import Path


class MarinaError(Exception):
    """Base class for every failure the marina core reports."""


class MalformedRecord(MarinaError, ValueError):
    """A line or set of fields does not describe a well-formed boat."""


class CapacityExceeded(MarinaError):
    def __init__(self, capacity: int) -> None:
        super().__init__(f"Marina is full ({capacity} boats)")
        self.capacity = capacity


class NotFound(MarinaError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"No boat with name {name!r}")
        self.name = name


class IndexOutOfRange(MarinaError, IndexError):
    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"Index {index} outside registry of {count} boats")
        self.index = index
        self.count = count


class Overpayment(MarinaError):
    """Payment larger than the balance; the balance is left untouched."""

    def __init__(self, amount: Decimal, amount_owed: Decimal) -> None:
        super().__init__(f"Payment {amount:.2f} exceeds amount owed {amount_owed:.2f}")
        self.amount = amount
        self.amount_owed = amount_owed


class InvalidPayment(MarinaError, ValueError):
    """Payment amount that is negative or not a finite number."""


class StorageUnavailable(MarinaError):
    """The ledger file could not be read or written."""

    def __init__(self, path: Path, reason: str, missing: bool = False) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
        self.missing = missing
