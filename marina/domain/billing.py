"""Domain service applying monthly charges and payments to boat balances."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Iterable, Mapping

from .errors import InvalidPayment, Overpayment
from .models import Boat, Location, LocationKind, to_money


class BillingEngine:
    """Moves ``amount_owed`` up by monthly charges and down by payments.

    Every call to :meth:`charge_all` represents one elapsed month, so calling
    it twice bills two months.
    """

    def __init__(self, monthly_rates: Mapping[LocationKind, Decimal]) -> None:
        missing = [kind.value for kind in LocationKind if kind not in monthly_rates]
        if missing:
            raise ValueError(f"No monthly rate configured for: {', '.join(missing)}")
        self._rates = {kind: Decimal(rate) for kind, rate in monthly_rates.items()}

    def monthly_rate(self, location: Location | LocationKind) -> Decimal:
        kind = location if isinstance(location, LocationKind) else location.kind
        return self._rates[kind]

    def monthly_charge(self, boat: Boat) -> Decimal:
        return to_money(boat.length * self.monthly_rate(boat.location))

    def apply_monthly_charge(self, boat: Boat) -> Decimal:
        charge = self.monthly_charge(boat)
        boat.amount_owed += charge
        return charge

    def charge_all(self, boats: Iterable[Boat]) -> Decimal:
        total = Decimal("0.00")
        for boat in boats:
            total += self.apply_monthly_charge(boat)
        return total

    def apply_payment(self, boat: Boat, amount: object) -> Decimal:
        """Deduct ``amount`` and return the new balance.

        Raises :class:`Overpayment` when the payment exceeds the balance and
        :class:`InvalidPayment` for negative, non-numeric or sub-cent amounts.
        The unrounded amount is compared with the balance.
        """
        try:
            payment = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        except InvalidOperation:
            raise InvalidPayment(f"Not a number: {amount!r}") from None
        if not payment.is_finite():
            raise InvalidPayment(f"Not a finite amount: {amount!r}")
        if payment < 0:
            raise InvalidPayment(f"Payment must not be negative, got {payment}")
        if payment > boat.amount_owed:
            raise Overpayment(payment, boat.amount_owed)
        if payment != to_money(payment):
            raise InvalidPayment(f"Payment has fractions of a cent: {payment}")
        boat.amount_owed -= payment
        return boat.amount_owed
