"""
Business logic and computations for the rental ledger
"""
from __future__ import annotations
from dataclasses import replace
from typing import Dict, Iterable, List, Sequence, Tuple

from models import (
    ACTORS,
    ActionType,
    Actor,
    Car,
    Commission,
    LedgerAction,
    MalformedRecord,
    Rental,
    RentalModification,
)
from store import RecordStore

# (days threshold, discount percent), ascending; every threshold the
# duration exceeds is applied in turn, so they compound
DISCOUNT_LADDER: Tuple[Tuple[int, int], ...] = ((1, 10), (4, 30), (10, 50))

ASSISTANCE_FEE_PER_DAY = 1
DEDUCTIBLE_REDUCTION_FEE_PER_DAY = 4

OVERRIDABLE_FIELDS = ("start_date", "end_date", "distance")


def discounted_daily_rate(price_per_day: int, days: int,
                          ladder: Sequence[Tuple[int, int]] = DISCOUNT_LADDER) -> int:
    """Daily rate after applying every ladder step with days > threshold"""
    rate = price_per_day
    for threshold, percent in ladder:
        if days > threshold:
            rate = (rate // (100 - percent)) * 100
    return rate


def rental_price(rental: Rental, car: Car,
                 ladder: Sequence[Tuple[int, int]] = DISCOUNT_LADDER) -> int:
    """Total price of a rental: discounted period price plus distance price"""
    days = rental.duration_days
    period_price = days * discounted_daily_rate(car.price_per_day, days, ladder)
    distance_price = rental.distance * car.price_per_km
    return period_price + distance_price


def compute_commission(rental: Rental, price: int) -> Commission:
    """Commission split for a rental priced at `price`"""
    return Commission(
        rental,
        price,
        assistance_fee_per_day=ASSISTANCE_FEE_PER_DAY,
        deductible_reduction_fee_per_day=DEDUCTIBLE_REDUCTION_FEE_PER_DAY,
    )


def actor_amount(actor: Actor, commission: Commission) -> int:
    """Amount moved for one actor"""
    if actor is Actor.DRIVER:
        return commission.price + commission.deductible_reduction_fee
    if actor is Actor.OWNER:
        # always 0 while the fees split the whole price
        return commission.price - commission.total_fee
    if actor is Actor.INSURANCE:
        return commission.insurance_fee
    if actor is Actor.ASSISTANCE:
        return commission.assistance_fee
    if actor is Actor.PLATFORM:
        return commission.platform_fee + commission.deductible_reduction_fee
    raise ValueError(f"unknown actor: {actor!r}")


def action_type(actor: Actor) -> ActionType:
    """Driver debits, every other actor credits"""
    return ActionType.DEBIT if actor is Actor.DRIVER else ActionType.CREDIT


def compute_ledger(commission: Commission) -> List[LedgerAction]:
    """One action per actor, in the fixed actor order"""
    return [LedgerAction(a, action_type(a), actor_amount(a, commission)) for a in ACTORS]


def apply_modifications(rental: Rental, modifications: Iterable[RentalModification]) -> Rental:
    """
    Return a copy of `rental` with each modification's present fields
    applied in order. id and car_id are never touched.
    Raises MalformedRecord, naming the last modification that moved a date,
    if the resulting end_date is before its start_date.
    """
    effective = rental
    last_date_change = None
    for m in modifications:
        changes = {f: getattr(m, f) for f in OVERRIDABLE_FIELDS if getattr(m, f) is not None}
        if changes:
            effective = replace(effective, **changes)
        if "start_date" in changes or "end_date" in changes:
            last_date_change = m
    if last_date_change is not None and effective.end_date < effective.start_date:
        raise MalformedRecord(
            "rental_modification", last_date_change.id,
            f"end_date {effective.end_date} is before start_date {effective.start_date} "
            f"for rental {rental.id!r}",
        )
    return effective


def effective_rental(store: RecordStore, rental_id) -> Rental:
    """The stored rental with all of its modifications applied"""
    return apply_modifications(store.rental(rental_id), store.modifications_for(rental_id))


def compute_actor_totals(document: dict) -> Dict[str, int]:
    """
    Net amount per actor across an actions report.
    Credits count positive, debits negative.
    """
    records = document.get("rentals") or document.get("rental_modifications") or []
    totals = {a.value: 0 for a in ACTORS}
    for rec in records:
        for action in rec.get("actions", []):
            sign = -1 if action["type"] == ActionType.DEBIT.value else 1
            totals[action["who"]] = totals.get(action["who"], 0) + sign * action["amount"]
    return totals
