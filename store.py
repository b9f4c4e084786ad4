"""
In-memory record store, built once from the data source and read thereafter
"""
from __future__ import annotations
from typing import Dict, Iterable, List

from models import Car, LookupFailure, RecordId, Rental, RentalModification


def _index_by_id(records: Iterable) -> Dict[RecordId, object]:
    """Map id -> record; on duplicate ids the first occurrence wins"""
    out = {}
    for r in records:
        out.setdefault(r.id, r)
    return out


class RecordStore:
    """Id-indexed cars, rentals and rental modifications"""

    def __init__(
        self,
        cars: Iterable[Car],
        rentals: Iterable[Rental],
        modifications: Iterable[RentalModification] = (),
    ):
        self.cars: List[Car] = list(cars)
        self.rentals: List[Rental] = list(rentals)
        self.modifications: List[RentalModification] = list(modifications)

        self._cars = _index_by_id(self.cars)
        self._rentals = _index_by_id(self.rentals)
        self._mods_by_rental: Dict[RecordId, List[RentalModification]] = {}
        for m in self.modifications:
            self._mods_by_rental.setdefault(m.rental_id, []).append(m)

    def car(self, car_id: RecordId) -> Car:
        try:
            return self._cars[car_id]
        except KeyError:
            raise LookupFailure("car", car_id) from None

    def rental(self, rental_id: RecordId) -> Rental:
        try:
            return self._rentals[rental_id]
        except KeyError:
            raise LookupFailure("rental", rental_id) from None

    def modifications_for(self, rental_id: RecordId) -> List[RentalModification]:
        """Modifications of a rental in their stored order"""
        return list(self._mods_by_rental.get(rental_id, []))
