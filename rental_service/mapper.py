# rental_service/mapper.py
"""Column schema shared by rental queries and row decoding.

`ROW_COLUMNS` is the single ordered list of columns a rental query selects.
The repository renders its SELECT list from it and `scan_rental` reads
result rows back in the same order, so the two cannot drift apart.
"""
from typing import Any, Dict, List, NamedTuple, Optional, Sequence

from pydantic import ValidationError

from .errors import ScanError
from .schemas import Rental, User


class ColumnSpec(NamedTuple):
    table: str
    name: str
    field: str
    alias: Optional[str] = None

    @property
    def output_name(self) -> str:
        """Name of the column in the result set (and in a wrapping subquery)."""
        return self.alias or self.name

    def select_expr(self, source: Optional[str] = None) -> str:
        """SELECT list entry, read from its own table or from the `source` subquery."""
        if source is not None:
            return f"{source}.{self.output_name}"
        expr = f"{self.table}.{self.name}"
        if self.alias:
            expr += f" AS {self.alias}"
        return expr


RENTAL_COLUMNS: List[ColumnSpec] = [
    ColumnSpec("rentals", "id", "id"),
    ColumnSpec("rentals", "user_id", "user_id"),
    ColumnSpec("rentals", "name", "name"),
    ColumnSpec("rentals", "type", "type"),
    ColumnSpec("rentals", "description", "description"),
    ColumnSpec("rentals", "sleeps", "sleeps"),
    ColumnSpec("rentals", "price_per_day", "price_per_day"),
    ColumnSpec("rentals", "home_city", "home_city"),
    ColumnSpec("rentals", "home_state", "home_state"),
    ColumnSpec("rentals", "home_zip", "home_zip"),
    ColumnSpec("rentals", "home_country", "home_country"),
    ColumnSpec("rentals", "vehicle_make", "vehicle_make"),
    ColumnSpec("rentals", "vehicle_model", "vehicle_model"),
    ColumnSpec("rentals", "vehicle_year", "vehicle_year"),
    ColumnSpec("rentals", "vehicle_length", "vehicle_length"),
    ColumnSpec("rentals", "lat", "lat"),
    ColumnSpec("rentals", "lng", "lng"),
    ColumnSpec("rentals", "primary_image_url", "primary_image_url"),
    ColumnSpec("rentals", "created", "created"),
    ColumnSpec("rentals", "updated", "updated"),
]

# users.id is aliased so it does not clash with rentals.id
USER_COLUMNS: List[ColumnSpec] = [
    ColumnSpec("users", "id", "id", alias="users_id"),
    ColumnSpec("users", "first_name", "first_name"),
    ColumnSpec("users", "last_name", "last_name"),
]

ROW_COLUMNS: List[ColumnSpec] = RENTAL_COLUMNS + USER_COLUMNS


def select_list(source: Optional[str] = None) -> List[str]:
    return [c.select_expr(source) for c in ROW_COLUMNS]


def scan_rental(row: Sequence[Any]) -> Rental:
    """Decode one result row, ordered as ROW_COLUMNS, into a Rental."""
    values = tuple(row)
    if len(values) != len(ROW_COLUMNS):
        raise ScanError(f"expected {len(ROW_COLUMNS)} columns, got {len(values)}")

    rental: Dict[str, Any] = {}
    user: Dict[str, Any] = {}
    for column, value in zip(ROW_COLUMNS, values):
        target = user if column.table == "users" else rental
        target[column.field] = value

    try:
        return Rental(**rental, user=User(**user))
    except ValidationError as e:
        raise ScanError(f"scanning rental row: {e}") from e
