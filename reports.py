"""
Batch orchestration: turn a record store into a report document
"""
from __future__ import annotations
import logging
from enum import Enum
from typing import List, Sequence, Tuple

from computations import (
    DISCOUNT_LADDER,
    compute_commission,
    compute_ledger,
    effective_rental,
    rental_price,
)
from models import RentalLedgerError, Rental, ReportError
from store import RecordStore

logger = logging.getLogger(__name__)


class ReportMode(Enum):
    PRICES = "prices"
    RENTALS = "rentals"
    MODIFICATIONS = "modifications"


def _actions(store: RecordStore, rental: Rental) -> List[dict]:
    price = rental_price(rental, store.car(rental.car_id))
    commission = compute_commission(rental, price)
    return [a.to_dict() for a in compute_ledger(commission)]


def build_price_report(store: RecordStore,
                       ladder: Sequence[Tuple[int, int]] = DISCOUNT_LADDER) -> dict:
    """{"rentals": [{"id", "price"}]} for every stored rental"""
    out = []
    for rental in store.rentals:
        try:
            price = rental_price(rental, store.car(rental.car_id), ladder)
        except RentalLedgerError as ex:
            raise ReportError("rental", rental.id, ex) from ex
        logger.debug("rental %s: price %d", rental.id, price)
        out.append({"id": rental.id, "price": price})
    logger.info("Priced %d rentals", len(out))
    return {"rentals": out}


def build_rental_report(store: RecordStore) -> dict:
    """Actions per stored rental, modifications ignored"""
    out = []
    for rental in store.rentals:
        try:
            actions = _actions(store, rental)
        except RentalLedgerError as ex:
            raise ReportError("rental", rental.id, ex) from ex
        logger.debug("rental %s: %d actions", rental.id, len(actions))
        out.append({"id": rental.id, "actions": actions})
    logger.info("Computed actions for %d rentals", len(out))
    return {"rentals": out}


def build_modification_report(store: RecordStore) -> dict:
    """Actions per modification, computed on the effective rental"""
    out = []
    for mod in store.modifications:
        try:
            actions = _actions(store, effective_rental(store, mod.rental_id))
        except RentalLedgerError as ex:
            raise ReportError("rental_modification", mod.id, ex) from ex
        logger.debug("modification %s (rental %s): %d actions", mod.id, mod.rental_id, len(actions))
        out.append({"id": mod.id, "rental_id": mod.rental_id, "actions": actions})
    logger.info("Computed actions for %d rental modifications", len(out))
    return {"rental_modifications": out}


def build_report(store: RecordStore, mode: ReportMode,
                 ladder: Sequence[Tuple[int, int]] = DISCOUNT_LADDER) -> dict:
    """Build the document for `mode`; the discount ladder only affects price reports"""
    if mode is ReportMode.PRICES:
        return build_price_report(store, ladder)
    if mode is ReportMode.RENTALS:
        return build_rental_report(store)
    if mode is ReportMode.MODIFICATIONS:
        return build_modification_report(store)
    raise ValueError(f"unknown report mode: {mode!r}")
