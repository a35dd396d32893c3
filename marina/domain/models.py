"""Domain models for the marina ledger.

A boat's location is a tagged variant: each of the four location classes
carries only its own payload, and its ``kind`` names the keyword used in the
ledger file.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import ClassVar, Union

from .errors import MalformedRecord

CENT = Decimal("0.01")
TRAILER_TAG_MAX = 15
NAME_MAX = 127
FORBIDDEN_CHARS = frozenset(",\r\n")


class LocationKind(str, Enum):
    SLIP = "slip"
    LAND = "land"
    # Legacy spelling, kept for file compatibility.
    TRAILER = "trailor"
    STORAGE = "storage"

    @classmethod
    def from_keyword(cls, keyword: str) -> LocationKind:
        try:
            return cls(keyword)
        except ValueError:
            raise MalformedRecord(f"Unknown location type {keyword!r}") from None


def _require_number(value: object, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedRecord(f"{label} must be an integer, got {value!r}")
    if value < 0:
        raise MalformedRecord(f"{label} must not be negative, got {value}")
    return value


def _require_field_text(value: object, label: str, max_length: int) -> str:
    """Text that survives a trip through the ledger file unchanged."""
    if not isinstance(value, str) or not value.strip():
        raise MalformedRecord(f"{label} must not be empty")
    if len(value) > max_length:
        raise MalformedRecord(f"{label} is longer than {max_length} characters: {value!r}")
    if value != value.strip() or FORBIDDEN_CHARS.intersection(value):
        raise MalformedRecord(f"{label} has surrounding whitespace or a separator: {value!r}")
    return value


@dataclass(frozen=True)
class Slip:
    number: int
    kind: ClassVar[LocationKind] = LocationKind.SLIP

    def __post_init__(self) -> None:
        _require_number(self.number, "Slip number")

    def value_text(self) -> str:
        return str(self.number)

    def describe(self) -> str:
        return f"   slip   # {self.number:2d}"


@dataclass(frozen=True)
class Land:
    bay: str
    kind: ClassVar[LocationKind] = LocationKind.LAND

    def __post_init__(self) -> None:
        if not isinstance(self.bay, str) or len(self.bay) != 1:
            raise MalformedRecord(f"Land bay must be a single character, got {self.bay!r}")
        if not self.bay.strip() or self.bay in FORBIDDEN_CHARS:
            raise MalformedRecord(f"Land bay must be a printable, non-separator character, got {self.bay!r}")

    def value_text(self) -> str:
        return self.bay

    def describe(self) -> str:
        return f"   land      {self.bay}"


@dataclass(frozen=True)
class Trailer:
    tag: str
    kind: ClassVar[LocationKind] = LocationKind.TRAILER

    def __post_init__(self) -> None:
        _require_field_text(self.tag, "Trailer tag", TRAILER_TAG_MAX)

    def value_text(self) -> str:
        return self.tag

    def describe(self) -> str:
        return f"trailor {self.tag}"


@dataclass(frozen=True)
class Storage:
    number: int
    kind: ClassVar[LocationKind] = LocationKind.STORAGE

    def __post_init__(self) -> None:
        _require_number(self.number, "Storage number")

    def value_text(self) -> str:
        return str(self.number)

    def describe(self) -> str:
        return f"storage   # {self.number:2d}"


Location = Union[Slip, Land, Trailer, Storage]
LOCATION_TYPES: dict[LocationKind, type] = {
    LocationKind.SLIP: Slip,
    LocationKind.LAND: Land,
    LocationKind.TRAILER: Trailer,
    LocationKind.STORAGE: Storage,
}


def to_money(value: object) -> Decimal:
    """Quantise a number to cents, rejecting anything that is not finite."""
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise MalformedRecord(f"Not a number: {value!r}") from None
    if not amount.is_finite():
        raise MalformedRecord(f"Not a finite amount: {value!r}")
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass
class Boat:
    """One marina record. Mutated in place by billing and payments."""

    name: str
    length: int
    location: Location
    amount_owed: Decimal = field(default_factory=lambda: Decimal("0.00"))

    def __post_init__(self) -> None:
        _require_field_text(self.name, "Boat name", NAME_MAX)
        if isinstance(self.length, bool) or not isinstance(self.length, int) or self.length <= 0:
            raise MalformedRecord(f"Length must be a positive integer, got {self.length!r}")
        if not isinstance(self.location, tuple(LOCATION_TYPES.values())):
            raise MalformedRecord(f"Unknown location {self.location!r}")
        self.amount_owed = to_money(self.amount_owed)
        if self.amount_owed < 0:
            raise MalformedRecord(f"Amount owed must not be negative, got {self.amount_owed}")

    @property
    def kind(self) -> LocationKind:
        return self.location.kind

    def sort_key(self) -> str:
        return self.name.casefold()
