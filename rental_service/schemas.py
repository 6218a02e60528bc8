# rental_service/schemas.py
from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


# Records decoded from result rows

class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    first_name: str
    last_name: str

class Rental(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    user_id: int
    name: str
    type: str
    description: str
    sleeps: int
    price_per_day: int
    home_city: str
    home_state: str
    home_zip: str
    home_country: str
    vehicle_make: str
    vehicle_model: str
    vehicle_year: int
    vehicle_length: float
    lat: float
    lng: float
    primary_image_url: str
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    user: User


# Response contract

class UserOut(BaseModel):
    id: int
    first_name: str
    last_name: str

class PriceOut(BaseModel):
    day: int

class LocationOut(BaseModel):
    city: str
    state: str
    zip: str
    country: str
    lat: float
    lng: float

class RentalOut(BaseModel):
    id: int
    name: str
    description: str
    type: str
    make: str
    model: str
    year: int
    length: float
    sleeps: int
    primary_image_url: str
    price: PriceOut
    location: LocationOut
    user: UserOut

    @classmethod
    def from_rental(cls, rental: Rental) -> "RentalOut":
        return cls(
            id=rental.id,
            name=rental.name,
            description=rental.description,
            type=rental.type,
            make=rental.vehicle_make,
            model=rental.vehicle_model,
            year=rental.vehicle_year,
            length=rental.vehicle_length,
            sleeps=rental.sleeps,
            primary_image_url=rental.primary_image_url,
            price=PriceOut(day=rental.price_per_day),
            location=LocationOut(
                city=rental.home_city,
                state=rental.home_state,
                zip=rental.home_zip,
                country=rental.home_country,
                lat=rental.lat,
                lng=rental.lng,
            ),
            user=UserOut(
                id=rental.user.id,
                first_name=rental.user.first_name,
                last_name=rental.user.last_name,
            ),
        )
