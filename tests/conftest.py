from __future__ import annotations
import copy
import json

import pytest

from config import dict_to_store

DATASET = {
    "cars": [
        {"id": 1, "price_per_day": 2000, "price_per_km": 10},
        {"id": 2, "price_per_day": 3000, "price_per_km": 15},
    ],
    "rentals": [
        {"id": 1, "car_id": 1, "start_date": "2015-12-8", "end_date": "2015-12-10", "distance": 100},
        {"id": 2, "car_id": 1, "start_date": "2015-03-31", "end_date": "2015-04-01", "distance": 300},
        {"id": 3, "car_id": 2, "start_date": "2015-07-3", "end_date": "2015-07-14", "distance": 1000},
    ],
    "rental_modifications": [
        {"id": 1, "rental_id": 1, "end_date": "2015-12-15"},
        {"id": 2, "rental_id": 2, "start_date": "2015-03-30"},
        {"id": 3, "rental_id": 1, "distance": 150},
    ],
}


@pytest.fixture
def dataset():
    return copy.deepcopy(DATASET)


@pytest.fixture
def store(dataset):
    return dict_to_store(dataset)


@pytest.fixture
def data_file(tmp_path, dataset):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(dataset), encoding="utf-8")
    return path
