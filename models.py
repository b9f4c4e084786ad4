"""
Data models for the rental ledger
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from functools import cached_property
from typing import Optional, Union

from utils import days_between

RecordId = Union[int, str]


class Actor(Enum):
    """Parties with a financial stake in a rental; value is the wire label"""
    DRIVER = "driver"
    OWNER = "owner"
    INSURANCE = "insurance"
    ASSISTANCE = "assistance"
    PLATFORM = "drivy"


ACTORS = (Actor.DRIVER, Actor.OWNER, Actor.INSURANCE, Actor.ASSISTANCE, Actor.PLATFORM)


class ActionType(Enum):
    DEBIT = "debit"
    CREDIT = "credit"


@dataclass(frozen=True)
class Car:
    """Car with daily and per-km rates in minor units"""
    id: RecordId
    price_per_day: int
    price_per_km: int


@dataclass(frozen=True)
class Rental:
    """Single rental; never mutated, modifications produce new copies"""
    id: RecordId
    car_id: RecordId
    start_date: date
    end_date: date
    distance: int  # km

    @property
    def duration_days(self) -> int:
        return days_between(self.start_date, self.end_date)


@dataclass(frozen=True)
class RentalModification:
    """Later change to a rental; None fields are left unchanged"""
    id: RecordId
    rental_id: RecordId
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    distance: Optional[int] = None


class Commission:
    """
    Split of a rental price between insurance, assistance and platform,
    plus the deductible reduction fee charged on top of the price.
    Fees are computed once per instance.
    """

    def __init__(self, rental: Rental, price: int,
                 assistance_fee_per_day: int, deductible_reduction_fee_per_day: int):
        self.rental = rental
        self.price = price
        self.assistance_fee_per_day = assistance_fee_per_day
        self.deductible_reduction_fee_per_day = deductible_reduction_fee_per_day

    @cached_property
    def insurance_fee(self) -> int:
        return self.price // 2

    @cached_property
    def assistance_fee(self) -> int:
        return self.assistance_fee_per_day * self.rental.duration_days

    @cached_property
    def platform_fee(self) -> int:
        # residual, absorbs the rounding of the insurance half
        return self.price - self.insurance_fee - self.assistance_fee

    @cached_property
    def deductible_reduction_fee(self) -> int:
        return self.deductible_reduction_fee_per_day * self.rental.duration_days

    @property
    def total_fee(self) -> int:
        return self.insurance_fee + self.assistance_fee + self.platform_fee

    def to_dict(self) -> dict:
        return {
            "insurance_fee": self.insurance_fee,
            "assistance_fee": self.assistance_fee,
            "platform_fee": self.platform_fee,
            "deductible_reduction_fee": self.deductible_reduction_fee,
        }


@dataclass(frozen=True)
class LedgerAction:
    """One actor's movement of money for a rental"""
    who: Actor
    type: ActionType
    amount: int

    def to_dict(self) -> dict:
        return {"who": self.who.value, "type": self.type.value, "amount": self.amount}


# ---------- Errors ----------

class RentalLedgerError(Exception):
    """Base error for the rental ledger"""


class LookupFailure(RentalLedgerError):
    """A referenced car or rental id has no stored record"""

    def __init__(self, kind: str, record_id: RecordId):
        super().__init__(f"{kind} {record_id!r} not found")
        self.kind = kind
        self.record_id = record_id


class MalformedRecord(RentalLedgerError):
    """An input record is missing a field or holds an unusable value"""

    def __init__(self, kind: str, record_id: Optional[RecordId], reason: str):
        label = f"{kind} {record_id!r}" if record_id is not None else kind
        super().__init__(f"malformed {label}: {reason}")
        self.kind = kind
        self.record_id = record_id
        self.reason = reason


class ReportError(RentalLedgerError):
    """Computation of one report item failed; the batch is aborted"""

    def __init__(self, item_kind: str, item_id: RecordId, cause: RentalLedgerError):
        super().__init__(f"{item_kind} {item_id!r}: {cause}")
        self.item_kind = item_kind
        self.item_id = item_id
        self.cause = cause
