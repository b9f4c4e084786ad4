from datetime import date

import pytest

from models import Car, LookupFailure, Rental, RentalModification
from store import RecordStore


def test_lookup_by_id(store):
    assert store.car(2).price_per_day == 3000
    assert store.rental(3).car_id == 2


def test_missing_car_raises_lookup_failure(store):
    with pytest.raises(LookupFailure) as exc:
        store.car(42)
    assert exc.value.kind == "car"
    assert exc.value.record_id == 42


def test_missing_rental_raises_lookup_failure(store):
    with pytest.raises(LookupFailure):
        store.rental("nope")


def test_first_duplicate_wins():
    cars = [Car(1, 100, 1), Car(1, 999, 9)]
    store = RecordStore(cars, [])
    assert store.car(1).price_per_day == 100


def test_modifications_keep_stored_order(store):
    assert [m.id for m in store.modifications_for(1)] == [1, 3]
    assert store.modifications_for(3) == []


def test_modifications_for_returns_a_copy():
    rental = Rental(1, 1, date(2015, 1, 1), date(2015, 1, 2), 0)
    store = RecordStore([], [rental], [RentalModification(1, 1, distance=5)])
    store.modifications_for(1).clear()
    assert len(store.modifications_for(1)) == 1


def test_accepts_any_iterable():
    rental = Rental(1, 1, date(2015, 1, 1), date(2015, 1, 2), 0)
    store = RecordStore((c for c in [Car(1, 100, 1)]), (rental,))
    assert store.cars == [Car(1, 100, 1)]
    assert store.rentals == [rental]
    assert store.modifications == []
