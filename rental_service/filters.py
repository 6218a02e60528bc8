# rental_service/filters.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple

# Public sort keys, in the order they are documented, and the rentals column
# each one orders by.
RENTAL_SORT_FIELDS = {
    "id": "id",
    "name": "name",
    "type": "type",
    "make": "vehicle_make",
    "model": "vehicle_model",
    "year": "vehicle_year",
    "length": "vehicle_length",
    "sleeps": "sleeps",
    "price_per_day": "price_per_day",
}


def sort_field_allowed(field: str) -> bool:
    """Whether rentals may be sorted by `field`."""
    return field in RENTAL_SORT_FIELDS


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class Pagination(BaseModel):
    model_config = ConfigDict(frozen=True)

    limit: Optional[int] = None
    offset: Optional[int] = None


class RentalFilters(BaseModel):
    """Criteria for listing rentals.

    Every field is optional; an empty RentalFilters() lists all rentals in
    storage order. An empty `ids` tuple is treated like an absent one.
    """
    model_config = ConfigDict(frozen=True)

    ids: Optional[Tuple[int, ...]] = None
    price_min: Optional[int] = None
    price_max: Optional[int] = None
    near: Optional[Location] = None
    sort: Optional[str] = None
    pagination: Pagination = Field(default_factory=Pagination)
