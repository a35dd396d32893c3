"""Boat inventory and billing ledger for a small marina."""
from marina.application.use_cases import (
    AcceptPaymentUseCase,
    AddBoatUseCase,
    ChargeMonthUseCase,
    LoadLedgerUseCase,
    MarinaContext,
    RemoveBoatUseCase,
    SaveLedgerUseCase,
)
from marina.domain.billing import BillingEngine
from marina.domain.models import Boat, Land, LocationKind, Slip, Storage, Trailer
from marina.domain.registry import BoatRegistry
from marina.infrastructure.repositories.file_repository import FlatFileBoatRepository

__all__ = [
    "AcceptPaymentUseCase",
    "AddBoatUseCase",
    "ChargeMonthUseCase",
    "LoadLedgerUseCase",
    "MarinaContext",
    "RemoveBoatUseCase",
    "SaveLedgerUseCase",
    "BillingEngine",
    "Boat",
    "Land",
    "LocationKind",
    "Slip",
    "Storage",
    "Trailer",
    "BoatRegistry",
    "FlatFileBoatRepository",
]
