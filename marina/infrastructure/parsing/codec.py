"""Codec between boat records and lines of the comma-separated ledger file.

Line layout: ``name,length,locationType,locationValue,amountOwed`` with no
header and no quoting, for example ``Eleanor,28,slip,23,1200.50``.
"""
from __future__ import annotations

import logging
from typing import Iterable

from marina.domain.errors import MalformedRecord
from marina.domain.models import (
    NAME_MAX,
    TRAILER_TAG_MAX,
    Boat,
    Land,
    Location,
    LocationKind,
    Slip,
    Storage,
    Trailer,
)
from marina.infrastructure.parsing.utils import parse_decimal, parse_int

logger = logging.getLogger(__name__)

FIELD_COUNT = 5
SEPARATOR = ","


def _parse_location(kind: LocationKind, raw: str) -> Location:
    if kind is LocationKind.SLIP:
        return Slip(parse_int(raw, "Slip number"))
    if kind is LocationKind.STORAGE:
        return Storage(parse_int(raw, "Storage number"))
    if kind is LocationKind.LAND:
        # Only the first character names the bay.
        return Land(raw[0])
    # Long tags are truncated, not rejected.
    return Trailer(raw[:TRAILER_TAG_MAX].rstrip())


def parse_line(line: str) -> Boat:
    """Parse one ledger line. Over-long names and trailer tags are truncated."""
    fields = [part.strip() for part in line.rstrip("\r\n").split(SEPARATOR)]
    if len(fields) != FIELD_COUNT:
        raise MalformedRecord(f"Expected {FIELD_COUNT} fields, got {len(fields)}: {line!r}")
    if not all(fields):
        raise MalformedRecord(f"Missing field in {line!r}")

    name, length_raw, keyword, location_raw, amount_raw = fields
    kind = LocationKind.from_keyword(keyword)
    return Boat(
        name=name[:NAME_MAX].rstrip(),
        length=parse_int(length_raw, "Length"),
        location=_parse_location(kind, location_raw),
        amount_owed=parse_decimal(amount_raw),
    )


def format_line(boat: Boat) -> str:
    return SEPARATOR.join(
        [
            boat.name,
            str(boat.length),
            boat.kind.value,
            boat.location.value_text(),
            f"{boat.amount_owed:.2f}",
        ]
    )


def parse_all(text: str, capacity: int | None = None) -> list[Boat]:
    """Parse every line of ``text``, dropping lines that do not parse.

    Parsing stops once ``capacity`` boats have been collected; the lines
    after that point are ignored.
    """
    boats: list[Boat] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if capacity is not None and len(boats) >= capacity:
            logger.debug("Capacity %d reached at line %d; ignoring the rest", capacity, lineno)
            break
        if not line.strip():
            continue
        try:
            boats.append(parse_line(line))
        except MalformedRecord as exc:
            logger.debug("Dropping line %d: %s", lineno, exc)
    return boats


def format_all(boats: Iterable[Boat]) -> str:
    return "".join(format_line(boat) + "\n" for boat in boats)
