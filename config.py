"""
Configuration and data loading/saving for the rental ledger
"""
from __future__ import annotations
import json
import logging
from typing import List, Optional, Type

from pydantic import BaseModel, ValidationError

from models import Car, MalformedRecord, Rental, RentalModification
from schemas import CarSchema, RentalModificationSchema, RentalSchema
from store import RecordStore

logger = logging.getLogger(__name__)

DEFAULT_INPUT_PATH = "data.json"
DEFAULT_OUTPUT_PATH = "output.json"
JSON_INDENT = 2


def _error_summary(ex: ValidationError) -> str:
    """One line per pydantic error: 'field: message'"""
    parts = []
    for err in ex.errors():
        where = ".".join(str(p) for p in err["loc"]) or "record"
        parts.append(f"{where}: {err['msg']}")
    return "; ".join(parts)


def _validate(schema: Type[BaseModel], kind: str, raw) -> dict:
    """Validate one raw record against its schema; raises MalformedRecord"""
    try:
        return schema.model_validate(raw).model_dump()
    except ValidationError as ex:
        record_id = raw.get("id") if isinstance(raw, dict) else None
        raise MalformedRecord(kind, record_id, _error_summary(ex)) from ex


def car_from_dict(d: dict) -> Car:
    """Build a Car from a raw 'cars' entry"""
    return Car(**_validate(CarSchema, "car", d))


def rental_from_dict(d: dict) -> Rental:
    """Build a Rental from a raw 'rentals' entry"""
    return Rental(**_validate(RentalSchema, "rental", d))


def modification_from_dict(d: dict) -> RentalModification:
    """Build a RentalModification from a raw 'rental_modifications' entry"""
    return RentalModification(**_validate(RentalModificationSchema, "rental_modification", d))


def _collection(data: dict, key: str, required: bool) -> List[dict]:
    """Raw entries of one top-level collection"""
    if key not in data:
        if required:
            raise MalformedRecord("dataset", None, f"missing '{key}' collection")
        return []
    items = data[key]
    if not isinstance(items, list):
        raise MalformedRecord("dataset", None, f"'{key}' must be a list")
    return items


def dict_to_store(data: dict) -> RecordStore:
    """Build a RecordStore from a parsed dataset document"""
    if not isinstance(data, dict):
        raise MalformedRecord("dataset", None, "top level must be an object")
    cars = [car_from_dict(c) for c in _collection(data, "cars", True)]
    rentals = [rental_from_dict(r) for r in _collection(data, "rentals", True)]
    mods = [modification_from_dict(m) for m in _collection(data, "rental_modifications", False)]
    return RecordStore(cars, rentals, mods)


def load_dataset(path: Optional[str] = None) -> RecordStore:
    """Load cars, rentals and rental modifications from a JSON file"""
    path = path or DEFAULT_INPUT_PATH
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    store = dict_to_store(data)
    logger.info(
        "Loaded %d cars, %d rentals, %d rental modifications from %s",
        len(store.cars), len(store.rentals), len(store.modifications), path,
    )
    return store


def document_to_json(document: dict) -> str:
    """Serialize a report document as indented JSON"""
    return json.dumps(document, ensure_ascii=False, indent=JSON_INDENT)


def save_document(document: dict, path: Optional[str] = None) -> None:
    """Write a report document as JSON"""
    path = path or DEFAULT_OUTPUT_PATH
    with open(path, "w", encoding="utf-8") as f:
        f.write(document_to_json(document))
        f.write("\n")
    logger.info("Wrote report to %s", path)
