# rental_service/api/routes.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from .. import schemas
from ..config import get_settings
from ..db import get_db
from ..errors import InvalidArgumentError
from ..filters import Location, Pagination, RentalFilters, sort_field_allowed
from ..repository import RentalRepository
from ..services import RentalFetching

router = APIRouter()

_invalid_parameter = "invalid parameter: %s"


def get_rental_fetching(db: Session = Depends(get_db)) -> RentalFetching:
    repository = RentalRepository(db, near_threshold_radius=get_settings().near_threshold_radius)
    return RentalFetching(repository)


def _parse_int(name, value, errors):
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        errors.append(_invalid_parameter % name)
        return None


def _parse_ids(value, errors):
    if not value:
        return None
    try:
        return tuple(int(part) for part in value.split(","))
    except ValueError:
        errors.append(_invalid_parameter % "ids")
        return None


def _parse_near(value, errors):
    if not value:
        return None
    parts = value.split(",")
    if len(parts) != 2:
        errors.append("invalid number of values for near (expected 2)")
        return None
    try:
        return Location(latitude=float(parts[0]), longitude=float(parts[1]))
    except ValueError:
        errors.append(_invalid_parameter % "near")
        return None


def rental_filters_from_query(
    ids: Optional[str] = None,
    price_min: Optional[str] = None,
    price_max: Optional[str] = None,
    near: Optional[str] = None,
    sort: Optional[str] = None,
    limit: Optional[str] = None,
    offset: Optional[str] = None,
) -> RentalFilters:
    """Decode raw query-string values, reporting every malformed one at once."""
    errors: List[str] = []

    parsed_ids = _parse_ids(ids, errors)
    parsed_min = _parse_int("price_min", price_min, errors)
    parsed_max = _parse_int("price_max", price_max, errors)
    parsed_near = _parse_near(near, errors)
    if sort and not sort_field_allowed(sort):
        errors.append(_invalid_parameter % "sort")
    parsed_limit = _parse_int("limit", limit, errors)
    parsed_offset = _parse_int("offset", offset, errors)

    if errors:
        raise InvalidArgumentError("; ".join(errors))

    return RentalFilters(
        ids=parsed_ids,
        price_min=parsed_min,
        price_max=parsed_max,
        near=parsed_near,
        sort=sort or None,
        pagination=Pagination(limit=parsed_limit, offset=parsed_offset),
    )


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/rentals/{rental_id}", response_model=schemas.RentalOut)
def get_rental(rental_id: str, fetching: RentalFetching = Depends(get_rental_fetching)):
    try:
        parsed_id = int(rental_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="invalid query parameters: id")
    return schemas.RentalOut.from_rental(fetching.get_rental_by_id(parsed_id))


@router.get("/rentals", response_model=List[schemas.RentalOut])
def list_rentals(
    ids: str | None = Query(None, description="comma separated rental ids"),
    price_min: str | None = Query(None),
    price_max: str | None = Query(None),
    near: str | None = Query(None, description="latitude,longitude"),
    sort: str | None = Query(None),
    limit: str | None = Query(None),
    offset: str | None = Query(None),
    fetching: RentalFetching = Depends(get_rental_fetching),
):
    filters = rental_filters_from_query(
        ids=ids,
        price_min=price_min,
        price_max=price_max,
        near=near,
        sort=sort,
        limit=limit,
        offset=offset,
    )
    return [schemas.RentalOut.from_rental(r) for r in fetching.list_rentals(filters)]
