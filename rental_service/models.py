# rental_service/models.py
"""SQLAlchemy table definitions for users and their rental listings.

The service only reads these tables; the models exist so the schema can be
created (`Base.metadata.create_all`) and seeded in tests.
"""
from sqlalchemy import Column, Integer, BigInteger, Float, Text, ForeignKey, TIMESTAMP, func, Index
from .db import Base

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)

class Rental(Base):
    __tablename__ = "rentals"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    name = Column(Text, nullable=False)
    type = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    sleeps = Column(Integer, nullable=False)
    price_per_day = Column(BigInteger, nullable=False)
    home_city = Column(Text, nullable=False, default="")
    home_state = Column(Text, nullable=False, default="")
    home_zip = Column(Text, nullable=False, default="")
    home_country = Column(Text, nullable=False, default="")
    vehicle_make = Column(Text, nullable=False, default="")
    vehicle_model = Column(Text, nullable=False, default="")
    vehicle_year = Column(Integer, nullable=False)
    vehicle_length = Column(Float, nullable=False)
    lat = Column(Float, nullable=False)
    lng = Column(Float, nullable=False)
    primary_image_url = Column(Text, nullable=False, default="")
    created = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated = Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now())

Index("idx_rentals_price_per_day", Rental.price_per_day)
Index("idx_rentals_lat_lng", Rental.lat, Rental.lng)
