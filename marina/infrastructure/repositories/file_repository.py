"""Flat-file repository persisting the boat ledger."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from marina.domain.errors import StorageUnavailable
from marina.domain.models import Boat
from marina.domain.repositories import BoatRepository
from marina.infrastructure.parsing.codec import format_all, parse_all

logger = logging.getLogger(__name__)


class FlatFileBoatRepository(BoatRepository):
    def __init__(self, path: Path | str, capacity: int | None = None, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._capacity = capacity
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def list_boats(self) -> Sequence[Boat]:
        try:
            text = self._path.read_text(encoding=self._encoding)
        except FileNotFoundError:
            raise StorageUnavailable(self._path, "file does not exist", missing=True) from None
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageUnavailable(self._path, str(exc)) from exc
        boats = parse_all(text, capacity=self._capacity)
        logger.info("Loaded %d boats from %s", len(boats), self._path)
        return boats

    def save_boats(self, boats: Iterable[Boat]) -> None:
        payload = format_all(boats)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(payload, encoding=self._encoding)
        except OSError as exc:
            raise StorageUnavailable(self._path, str(exc)) from exc
        logger.info("Saved %d boats to %s", payload.count("\n"), self._path)
