import math
import os

# the application settings need a database URL at import time
os.environ.setdefault("POSTGRES_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from rental_service.db import Base
from rental_service import models

NEAR_THRESHOLD_RADIUS = 100


@pytest.fixture
def engine():
    # in-memory SQLite shared by every thread (TestClient runs handlers in a worker thread)
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(eng, "connect")
    def register_math_functions(dbapi_connection, connection_record):
        dbapi_connection.create_function("SQRT", 1, math.sqrt)

    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def add_rental(db):
    """Insert a rental (and its owner on first use) and return the ORM object."""

    def _add(id, user_id=1, **overrides):
        if db.get(models.User, user_id) is None:
            db.add(models.User(id=user_id, first_name=f"First{user_id}", last_name=f"Last{user_id}"))
        values = {
            "name": f"Rental {id}",
            "type": "camper-van",
            "description": f"Description {id}",
            "sleeps": 4,
            "price_per_day": 1000,
            "home_city": "Costa Mesa",
            "home_state": "CA",
            "home_zip": "92627",
            "home_country": "US",
            "vehicle_make": "Volkswagen",
            "vehicle_model": "Bus",
            "vehicle_year": 1969,
            "vehicle_length": 15.0,
            "lat": 33.64,
            "lng": -117.93,
            "primary_image_url": f"https://images.example.com/{id}.png",
        }
        values.update(overrides)
        rental = models.Rental(id=id, user_id=user_id, **values)
        db.add(rental)
        db.commit()
        return rental

    return _add
