"""Command-line entrypoint: the interactive boat management session."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from marina.application.use_cases import (
    MARINA_FULL,
    AcceptPaymentUseCase,
    AddBoatUseCase,
    ChargeMonthUseCase,
    LoadLedgerUseCase,
    MarinaContext,
    RemoveBoatUseCase,
    SaveLedgerUseCase,
)
from marina.config import SETTINGS
from marina.domain.billing import BillingEngine
from marina.domain.errors import MalformedRecord
from marina.domain.registry import BoatRegistry
from marina.infrastructure.parsing.utils import parse_decimal
from marina.infrastructure.repositories.file_repository import FlatFileBoatRepository
from marina.presentation.inventory_report import render_inventory

logger = logging.getLogger(__name__)

MENU = "\n(I)nventory, (A)dd, (R)emove, (P)ayment, (M)onth, e(X)it : "
ASK_CSV = "Please enter the boat data in CSV format                 : "
ASK_NAME = "Please enter the boat name                               : "
ASK_AMOUNT = "Please enter the amount to be paid                       : "


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage a marina's boat inventory and billing")
    parser.add_argument("ledger", type=Path, help="Path to the boat data CSV file")
    parser.add_argument("--capacity", type=int, default=SETTINGS.capacity, help="Maximum number of boats")
    parser.add_argument("--log-level", default=SETTINGS.log_level, help="Logging level (default: %(default)s)")
    return parser.parse_args(argv)


def build_context(ledger: Path, capacity: int) -> MarinaContext:
    return MarinaContext(
        registry=BoatRegistry(capacity),
        repository=FlatFileBoatRepository(ledger, capacity=capacity),
        billing=BillingEngine(SETTINGS.monthly_rates),
    )


def _ask(prompt: str) -> str:
    try:
        return input(prompt).strip()
    except EOFError:
        return ""


def _split_name_amount(rest: str) -> tuple[str, str | None]:
    """Split ``"Big Brother 20.00"`` into name and amount; the amount is optional."""
    name, _, last = rest.rpartition(" ")
    if name:
        try:
            parse_decimal(last)
        except MalformedRecord:
            return rest, None
        return name.strip(), last
    return rest, None


class Session:
    def __init__(self, context: MarinaContext) -> None:
        self.context = context
        self._add = AddBoatUseCase(context)
        self._remove = RemoveBoatUseCase(context)
        self._payment = AcceptPaymentUseCase(context)
        self._month = ChargeMonthUseCase(context)
        self._save = SaveLedgerUseCase(context)

    def run(self) -> int:
        print("Welcome to the Boat Management System")
        print("-------------------------------------")
        while True:
            try:
                option = input(MENU).strip()
            except EOFError:
                option = "x"
            if self.dispatch(option):
                return 0

    def dispatch(self, option: str) -> bool:
        """Handle one command line. Returns True when the session should end.

        Only the first character of the command word counts, so ``add`` and
        ``a`` both add; inline arguments follow after a space.
        """
        command, _, rest = option.partition(" ")
        letter, rest = command[:1].lower(), rest.strip()
        if letter == "i":
            self.inventory()
        elif letter == "a":
            self.add(rest)
        elif letter == "r":
            self.remove(rest)
        elif letter == "p":
            self.pay(rest)
        elif letter == "m":
            print(self._month.execute().message)
        elif letter == "x":
            self.exit()
            return True
        else:
            print(f"Invalid option {option[:1]}")
        return False

    def inventory(self) -> None:
        registry = self.context.registry
        if len(registry):
            print(render_inventory(registry.iter_sorted()))

    def add(self, line: str) -> None:
        if self.context.registry.is_full:
            print(MARINA_FULL)
            return
        result = self._add.execute(line or _ask(ASK_CSV))
        if not result.ok:
            print(result.message)

    def remove(self, name: str) -> None:
        result = self._remove.execute(name or _ask(ASK_NAME))
        if not result.ok:
            print(result.message)

    def pay(self, rest: str) -> None:
        name, amount = _split_name_amount(rest) if rest else (_ask(ASK_NAME), None)
        found = self._payment.find(name)
        if not found.ok:
            print(found.message)
            return
        result = self._payment.execute(name, amount if amount is not None else _ask(ASK_AMOUNT))
        if not result.ok:
            print(result.message)

    def exit(self) -> None:
        print("Exiting the Boat Management System")
        result = self._save.execute()
        if not result.ok:
            print(result.message)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.capacity <= 0:
        print(f"Capacity must be positive, got {args.capacity}", file=sys.stderr)
        return 2

    context = build_context(args.ledger, args.capacity)
    loaded = LoadLedgerUseCase(context).execute()
    if not loaded.ok:
        print(loaded.message, file=sys.stderr)
        if loaded.error is None or not getattr(loaded.error, "missing", False):
            return 1
    logger.debug("Session starting with %d boats", len(context.registry))

    return Session(context).run()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
