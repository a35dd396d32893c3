"""In-memory registry of boats, kept in case-insensitive name order."""
from __future__ import annotations

from bisect import bisect_right
from typing import Iterable, Iterator

from .errors import CapacityExceeded, IndexOutOfRange, NotFound
from .models import Boat


class BoatRegistry:
    """Ordered, capacity-bounded collection that owns its Boat records.

    Boats are stored in ascending ``name.casefold()`` order. A new boat goes
    to the first position whose name sorts strictly after its own, so boats
    sharing a name keep their insertion order. The capacity is a business
    rule (the marina has that many berths) and is enforced on every insert.
    """

    def __init__(self, capacity: int, boats: Iterable[Boat] = ()) -> None:
        if capacity <= 0:
            raise ValueError(f"Registry capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._boats: list[Boat] = []
        self.load(boats)

    def __len__(self) -> int:
        return len(self._boats)

    def __iter__(self) -> Iterator[Boat]:
        return self.iter_sorted()

    def __repr__(self) -> str:
        return f"BoatRegistry(count={len(self._boats)}, capacity={self._capacity})"

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._boats) >= self._capacity

    def insert(self, boat: Boat) -> int:
        """Insert ``boat`` at its sorted position and return the new count."""
        if self.is_full:
            raise CapacityExceeded(self._capacity)
        position = bisect_right(self._boats, boat.sort_key(), key=Boat.sort_key)
        self._boats.insert(position, boat)
        return len(self._boats)

    def load(self, boats: Iterable[Boat]) -> int:
        """Bulk insert, stopping quietly once the registry is full."""
        loaded = 0
        for boat in boats:
            if self.is_full:
                break
            self.insert(boat)
            loaded += 1
        return loaded

    def find_by_name(self, name: str) -> int:
        """Index of the first boat whose name matches ``name`` ignoring case."""
        wanted = name.casefold()
        for index, boat in enumerate(self._boats):
            if boat.sort_key() == wanted:
                return index
        raise NotFound(name)

    def get(self, index: int) -> Boat:
        self._check_index(index)
        return self._boats[index]

    def remove_at(self, index: int) -> Boat:
        """Remove the boat at ``index``; later boats shift down by one."""
        self._check_index(index)
        return self._boats.pop(index)

    def remove_by_name(self, name: str) -> Boat:
        return self.remove_at(self.find_by_name(name))

    def iter_sorted(self) -> Iterator[Boat]:
        """Yield boats in registry order. Each call starts a fresh pass."""
        for boat in tuple(self._boats):
            yield boat

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._boats):
            raise IndexOutOfRange(index, len(self._boats))
