from decimal import Decimal

import pytest

from marina.config import MONTHLY_RATES
from marina.domain.billing import BillingEngine
from marina.domain.errors import InvalidPayment, Overpayment
from marina.domain.models import Boat, Land, LocationKind, Slip, Storage, Trailer
from marina.domain.registry import BoatRegistry


def make_engine() -> BillingEngine:
    return BillingEngine(MONTHLY_RATES)


@pytest.mark.parametrize(
    "location, expected",
    [
        (Slip(1), Decimal("125.00")),
        (Land("A"), Decimal("140.00")),
        (Trailer("TAG1"), Decimal("250.00")),
        (Storage(4), Decimal("112.00")),
    ],
)
def test_monthly_charge_per_location(location, expected):
    boat = Boat(name="Test", length=10, location=location)

    charge = make_engine().apply_monthly_charge(boat)

    assert charge == expected
    assert boat.amount_owed == expected


def test_monthly_charge_is_cumulative():
    engine = make_engine()
    boat = Boat(name="Eleanor", length=28, location=Slip(23), amount_owed=Decimal("100.00"))

    engine.apply_monthly_charge(boat)
    engine.apply_monthly_charge(boat)

    assert boat.amount_owed == Decimal("100.00") + 2 * 28 * Decimal("12.50")


def test_charge_all_bills_every_boat_and_returns_total():
    registry = BoatRegistry(capacity=120)
    registry.insert(Boat(name="A", length=10, location=Slip(1)))
    registry.insert(Boat(name="B", length=20, location=Storage(2)))

    total = make_engine().charge_all(registry)

    assert total == Decimal("125.00") + Decimal("224.00")
    assert [b.amount_owed for b in registry] == [Decimal("125.00"), Decimal("224.00")]


def test_payment_reduces_balance():
    boat = Boat(name="Eleanor", length=28, location=Slip(23), amount_owed=Decimal("100.00"))

    balance = make_engine().apply_payment(boat, Decimal("40.25"))

    assert balance == Decimal("59.75")
    assert boat.amount_owed == Decimal("59.75")


def test_payment_of_full_balance_reaches_zero():
    boat = Boat(name="Eleanor", length=28, location=Slip(23), amount_owed=Decimal("1550.50"))

    assert make_engine().apply_payment(boat, "1550.50") == Decimal("0.00")


@pytest.mark.parametrize("amount", ["100.01", "5000"])
def test_overpayment_rejected_and_balance_unchanged(amount):
    boat = Boat(name="Eleanor", length=28, location=Slip(23), amount_owed=Decimal("100.00"))

    with pytest.raises(Overpayment) as excinfo:
        make_engine().apply_payment(boat, Decimal(amount))

    assert excinfo.value.amount_owed == Decimal("100.00")
    assert boat.amount_owed == Decimal("100.00")


@pytest.mark.parametrize("amount", [Decimal("-1"), "abc", Decimal("Infinity")])
def test_invalid_payment_amounts(amount):
    boat = Boat(name="Eleanor", length=28, location=Slip(23), amount_owed=Decimal("100.00"))

    with pytest.raises(InvalidPayment):
        make_engine().apply_payment(boat, amount)
    assert boat.amount_owed == Decimal("100.00")


def test_engine_requires_every_rate():
    with pytest.raises(ValueError):
        BillingEngine({LocationKind.SLIP: Decimal("12.50")})


def test_monthly_rate_lookup():
    engine = make_engine()

    assert engine.monthly_rate(LocationKind.TRAILER) == Decimal("25.00")
    assert engine.monthly_rate(Storage(3)) == Decimal("11.20")


def test_payment_over_balance_by_less_than_a_cent_is_overpayment():
    boat = Boat(name="Eleanor", length=28, location=Slip(23), amount_owed=Decimal("100.00"))

    with pytest.raises(Overpayment):
        make_engine().apply_payment(boat, Decimal("100.004"))
    assert boat.amount_owed == Decimal("100.00")


def test_payment_with_fractions_of_a_cent_is_invalid():
    boat = Boat(name="Eleanor", length=28, location=Slip(23), amount_owed=Decimal("100.00"))

    with pytest.raises(InvalidPayment):
        make_engine().apply_payment(boat, Decimal("50.004"))
    assert boat.amount_owed == Decimal("100.00")
