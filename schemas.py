"""
Input record schemas

Pydantic models for the raw records of a dataset file.
Each schema validates one entry of a collection:
- CarSchema -> "cars"
- RentalSchema -> "rentals"
- RentalModificationSchema -> "rental_modifications"
"""

from datetime import date
from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator, model_validator

from utils import parse_date

RecordIdField = Union[StrictInt, StrictStr]
Amount = Annotated[int, Field(strict=True, ge=0)]


def _coerce_date(value):
    """Accept a date or a YYYY-MM-DD string (month and day may be unpadded)"""
    if value is None or isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_date(value)
    raise ValueError(f"expected a YYYY-MM-DD date, got {type(value).__name__}")


class CarSchema(BaseModel):
    """Car entry; prices in minor units"""
    model_config = ConfigDict(extra="forbid")

    id: RecordIdField
    price_per_day: Amount = Field(..., description="Price per day, minor units")
    price_per_km: Amount = Field(..., description="Price per km, minor units")


class RentalSchema(BaseModel):
    """Rental entry"""
    model_config = ConfigDict(extra="forbid")

    id: RecordIdField
    car_id: RecordIdField
    start_date: date
    end_date: date
    distance: Amount = Field(..., description="Distance in km")

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_dates(cls, value):
        return _coerce_date(value)

    @model_validator(mode="after")
    def check_period(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date is before start_date")
        return self


class RentalModificationSchema(BaseModel):
    """Rental modification entry; absent or null fields stay unchanged"""
    model_config = ConfigDict(extra="forbid")

    id: RecordIdField
    rental_id: RecordIdField
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    distance: Optional[Amount] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_dates(cls, value):
        return _coerce_date(value)
