# rental_service/repository.py
"""Read access to rentals.

`RentalRepository` turns a `RentalFilters` value into a single parameterized
SQL query, runs it on the request's session and decodes the rows.

Proximity search is answered in two stages: an inner query keeps rentals
whose latitude and longitude are both within the configured radius of the
target point (a cheap bounding box that the (lat, lng) index can serve),
and an outer query over that subquery keeps the ones whose flat-plane
distance ``SQRT(a*a + b*b)`` is within the radius. Ordering and pagination
apply to the outer query.
"""
from typing import List

from sqlalchemy.engine import Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .errors import InvalidArgumentError, NotFoundError, RentalServiceError, StorageError
from .filters import RENTAL_SORT_FIELDS, RentalFilters, sort_field_allowed
from .mapper import scan_rental, select_list
from .query_builder import QueryBuilder
from .schemas import Rental
from .utils import sql_logger

RENTALS_TABLE = "rentals"
SUBQUERY_ALIAS = "subquery"
USERS_JOIN = "users ON users.id = rentals.user_id"


def _base_query() -> QueryBuilder:
    return (
        QueryBuilder()
        .select()
        .columns(*select_list())
        .from_(RENTALS_TABLE)
        .join(USERS_JOIN)
    )


def _validate(filters: RentalFilters) -> None:
    if filters.sort is not None and not sort_field_allowed(filters.sort):
        raise InvalidArgumentError(f"invalid argument: sort field {filters.sort!r} is not allowed")
    if filters.pagination.limit is not None and filters.pagination.limit < 0:
        raise InvalidArgumentError("invalid argument: limit must be non-negative")
    if filters.pagination.offset is not None and filters.pagination.offset < 0:
        raise InvalidArgumentError("invalid argument: offset must be non-negative")


class RentalRepository:
    def __init__(self, db: Session, near_threshold_radius: int):
        self.db = db
        self.near_threshold_radius = near_threshold_radius

    def get_by_id(self, rental_id: int) -> Rental:
        """Return the rental with `rental_id` or raise NotFoundError."""
        qb = _base_query().where("rentals.id = :rental_id", rental_id=rental_id)

        try:
            rows = self._execute(qb)
            if not rows:
                raise NotFoundError(f"rental {rental_id} not found")
            return scan_rental(rows[0])
        except RentalServiceError as e:
            raise e.wrap("getting rental by id") from e

    def list(self, filters: RentalFilters) -> List[Rental]:
        """Return the rentals matching `filters`; an empty list when none do."""
        qb = self.build_list_query(filters)

        try:
            return [scan_rental(row) for row in self._execute(qb)]
        except RentalServiceError as e:
            raise e.wrap("listing rentals") from e

    def build_list_query(self, filters: RentalFilters) -> QueryBuilder:
        _validate(filters)

        qb = _base_query()

        if filters.ids:
            # duplicates would only repeat a placeholder
            ids = list(dict.fromkeys(filters.ids))
            placeholders = ", ".join(f":id_{i}" for i in range(len(ids)))
            qb = qb.where(
                f"rentals.id IN ({placeholders})",
                **{f"id_{i}": rental_id for i, rental_id in enumerate(ids)},
            )

        if filters.price_min is not None:
            qb = qb.where("rentals.price_per_day >= :price_min", price_min=filters.price_min)

        if filters.price_max is not None:
            qb = qb.where("rentals.price_per_day <= :price_max", price_max=filters.price_max)

        source = RENTALS_TABLE
        if filters.near is not None:
            qb = self._near(qb, filters.near.latitude, filters.near.longitude)
            source = SUBQUERY_ALIAS

        if filters.sort is not None:
            qb = qb.order_by(f"{source}.{RENTAL_SORT_FIELDS[filters.sort]}")

        if filters.pagination.limit is not None:
            qb = qb.limit(filters.pagination.limit)

        if filters.pagination.offset is not None:
            qb = qb.offset(filters.pagination.offset)

        return qb

    def _near(self, qb: QueryBuilder, latitude: float, longitude: float) -> QueryBuilder:
        radius = self.near_threshold_radius

        inner = (
            qb.columns(
                "ABS(rentals.lat - :near_lat) AS a",
                "ABS(rentals.lng - :near_lng) AS b",
            )
            .bind(near_lat=latitude, near_lng=longitude, radius=radius)
            .where("ABS(rentals.lat - :near_lat) <= :radius")
            .where("ABS(rentals.lng - :near_lng) <= :radius")
        )

        return (
            QueryBuilder()
            .select()
            .columns(*select_list(SUBQUERY_ALIAS))
            .from_subquery(inner, SUBQUERY_ALIAS)
            .where(
                f"SQRT({SUBQUERY_ALIAS}.a * {SUBQUERY_ALIAS}.a + {SUBQUERY_ALIAS}.b * {SUBQUERY_ALIAS}.b) <= :radius",
                radius=radius,
            )
        )

    def _execute(self, qb: QueryBuilder) -> List[Row]:
        sql_logger.debug("%s %s", qb.render(), qb.params)
        try:
            return self.db.execute(qb.statement()).all()
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e
