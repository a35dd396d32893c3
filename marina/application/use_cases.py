"""Application services orchestrating the marina operator commands.

Each use case catches the domain errors its command can raise and turns
them into a :class:`CommandResult`, so callers never see an exception for
an ordinary operator mistake.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from marina.application.dto import CommandResult
from marina.domain.billing import BillingEngine
from marina.domain.errors import (
    CapacityExceeded,
    InvalidPayment,
    MalformedRecord,
    NotFound,
    Overpayment,
    StorageUnavailable,
)
from marina.domain.registry import BoatRegistry
from marina.domain.repositories import BoatRepository
from marina.infrastructure.parsing.codec import parse_line
from marina.infrastructure.parsing.utils import parse_decimal

logger = logging.getLogger(__name__)

INVALID_INPUT = "Invalid input"
NO_SUCH_BOAT = "No boat with that name"
MARINA_FULL = "Marina is full"


@dataclass(slots=True)
class MarinaContext:
    registry: BoatRegistry
    repository: BoatRepository
    billing: BillingEngine


class LoadLedgerUseCase:
    def __init__(self, context: MarinaContext) -> None:
        self._context = context

    def execute(self) -> CommandResult:
        try:
            boats = self._context.repository.list_boats()
        except StorageUnavailable as exc:
            logger.warning("Starting with an empty registry: %s", exc)
            return CommandResult.failure(f"ERROR: {exc}", count=0, error=exc)
        loaded = self._context.registry.load(boats)
        return CommandResult.success(f"Loaded {loaded} boats", count=loaded)


class AddBoatUseCase:
    def __init__(self, context: MarinaContext) -> None:
        self._context = context

    def execute(self, line: str) -> CommandResult:
        registry = self._context.registry
        if registry.is_full:
            return CommandResult.failure(MARINA_FULL, count=len(registry))
        try:
            boat = parse_line(line)
            count = registry.insert(boat)
        except MalformedRecord as exc:
            logger.info("Rejected boat line %r: %s", line, exc)
            return CommandResult.failure(INVALID_INPUT, error=exc)
        except CapacityExceeded as exc:
            return CommandResult.failure(MARINA_FULL, count=len(registry), error=exc)
        logger.info("Added %s (%d boats)", boat.name, count)
        return CommandResult.success(f"Added {boat.name}", boat=boat, count=count)


class RemoveBoatUseCase:
    def __init__(self, context: MarinaContext) -> None:
        self._context = context

    def execute(self, name: str) -> CommandResult:
        registry = self._context.registry
        try:
            boat = registry.remove_at(registry.find_by_name(name.strip()))
        except NotFound as exc:
            return CommandResult.failure(NO_SUCH_BOAT, error=exc)
        logger.info("Removed %s (%d boats)", boat.name, len(registry))
        return CommandResult.success(f"Removed {boat.name}", boat=boat, count=len(registry))


class AcceptPaymentUseCase:
    def __init__(self, context: MarinaContext) -> None:
        self._context = context

    def find(self, name: str) -> CommandResult:
        registry = self._context.registry
        try:
            boat = registry.get(registry.find_by_name(name.strip()))
        except NotFound as exc:
            return CommandResult.failure(NO_SUCH_BOAT, error=exc)
        return CommandResult.success(boat.name, boat=boat, amount=boat.amount_owed)

    def execute(self, name: str, amount: str | Decimal) -> CommandResult:
        found = self.find(name)
        if not found.ok:
            return found
        boat = found.boat
        try:
            payment = parse_decimal(amount) if isinstance(amount, str) else amount
            balance = self._context.billing.apply_payment(boat, payment)
        except (MalformedRecord, InvalidPayment) as exc:
            return CommandResult.failure(INVALID_INPUT, boat=boat, error=exc)
        except Overpayment as exc:
            return CommandResult.failure(
                f"That is more than the amount owed, ${exc.amount_owed:.2f}",
                boat=boat,
                amount=exc.amount_owed,
                error=exc,
            )
        logger.info("Payment accepted for %s; balance %s", boat.name, balance)
        return CommandResult.success(f"{boat.name} now owes ${balance:.2f}", boat=boat, amount=balance)


class ChargeMonthUseCase:
    def __init__(self, context: MarinaContext) -> None:
        self._context = context

    def execute(self) -> CommandResult:
        registry = self._context.registry
        total = self._context.billing.charge_all(registry.iter_sorted())
        logger.info("Billed one month to %d boats, total %s", len(registry), total)
        return CommandResult.success(
            f"Monthly charges applied to {len(registry)} boats",
            count=len(registry),
            amount=total,
        )


class SaveLedgerUseCase:
    def __init__(self, context: MarinaContext) -> None:
        self._context = context

    def execute(self) -> CommandResult:
        registry = self._context.registry
        try:
            self._context.repository.save_boats(registry.iter_sorted())
        except StorageUnavailable as exc:
            logger.error("Could not save ledger: %s", exc)
            return CommandResult.failure(f"ERROR: {exc}", count=len(registry), error=exc)
        return CommandResult.success(f"Saved {len(registry)} boats", count=len(registry))
