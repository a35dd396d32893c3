"""Application-level DTOs for marina commands."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from marina.domain.errors import MarinaError
from marina.domain.models import Boat


@dataclass(slots=True, frozen=True)
class CommandResult:
    ok: bool
    message: str
    boat: Boat | None = None
    count: int | None = None
    amount: Decimal | None = None
    error: MarinaError | None = None

    @classmethod
    def success(cls, message: str, **details: object) -> CommandResult:
        return cls(ok=True, message=message, **details)

    @classmethod
    def failure(cls, message: str, **details: object) -> CommandResult:
        return cls(ok=False, message=message, **details)
