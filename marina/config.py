"""Central configuration for the marina ledger package."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from marina.domain.models import LocationKind

BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = BASE_DIR / "data"

DEFAULT_CAPACITY = 120
DEFAULT_NAME_WIDTH = 20

# Currency units per foot per month.
MONTHLY_RATES = MappingProxyType(
    {
        LocationKind.SLIP: Decimal("12.50"),
        LocationKind.LAND: Decimal("14.00"),
        LocationKind.TRAILER: Decimal("25.00"),
        LocationKind.STORAGE: Decimal("11.20"),
    }
)


@dataclass(slots=True, frozen=True)
class Settings:
    capacity: int = DEFAULT_CAPACITY
    monthly_rates: Mapping[LocationKind, Decimal] = field(default_factory=lambda: MONTHLY_RATES)
    name_width: int = DEFAULT_NAME_WIDTH
    default_ledger_path: Path = DATA_DIR / "BoatData.csv"
    log_level: str = "WARNING"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings, letting ``MARINA_*`` environment variables override defaults."""
    env = os.environ if environ is None else environ

    def _int(value: str | None, default: int) -> int:
        try:
            parsed = int(value) if value is not None else default
        except ValueError:
            return default
        return parsed if parsed > 0 else default

    ledger = env.get("MARINA_LEDGER_PATH")
    return Settings(
        capacity=_int(env.get("MARINA_CAPACITY"), DEFAULT_CAPACITY),
        default_ledger_path=Path(ledger) if ledger else DATA_DIR / "BoatData.csv",
        log_level=(env.get("MARINA_LOG_LEVEL") or "WARNING").upper(),
    )


SETTINGS = load_settings()
