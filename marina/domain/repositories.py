"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from .models import Boat


class BoatRepository(Protocol):
    """Loads and persists the full set of boat records."""

    def list_boats(self) -> Sequence[Boat]:
        ...

    def save_boats(self, boats: Iterable[Boat]) -> None:
        ...
