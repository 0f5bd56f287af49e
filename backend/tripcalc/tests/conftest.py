"""
Shared fixtures: in-memory database, API client and user tokens.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from tripcalc.core.security import create_access_token
from tripcalc.db.base import Base
from tripcalc.db.session import get_db
from tripcalc.main import app
from tripcalc.models import City, CityDailyCost, Trip, TravelStyle, TripStyle, User


@pytest.fixture
def db():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db):
    """API client sharing the test database session."""
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    """Factory for persisted users."""
    def _make_user(email, is_admin=False, is_premium=False, name=None):
        user = User(email=email, name=name, is_admin=is_admin, is_premium=is_premium)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


def auth_headers(user) -> dict:
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth():
    """Build bearer headers for a user."""
    return auth_headers


@pytest.fixture
def owner(make_user):
    return make_user("owner@example.com", name="Owner")


@pytest.fixture
def other(make_user):
    return make_user("other@example.com", name="Other")


@pytest.fixture
def admin(make_user):
    return make_user("admin@example.com", is_admin=True, name="Admin")


@pytest.fixture
def city(db):
    """Published city with budget and mid-range presets (cents)."""
    city = City(
        id="barcelona",
        name="Barcelona",
        country="Spain",
        country_code="ES",
        currency="EUR",
        currency_symbol="€",
        language="Spanish",
        latitude=41.3874,
        longitude=2.1686,
        is_published=True,
        last_updated="2025-01"
    )
    db.add(city)
    db.add(CityDailyCost(
        city_id="barcelona", travel_style=TravelStyle.BUDGET,
        accommodation=3000, food=2500, transport=800, activities=1500
    ))
    db.add(CityDailyCost(
        city_id="barcelona", travel_style=TravelStyle.MID_RANGE,
        accommodation=8000, food=5000, transport=1500, activities=3000
    ))
    db.commit()
    return city


@pytest.fixture
def make_trip(db):
    """Factory for persisted trips."""
    def _make_trip(user, **fields):
        values = {
            "name": "Weekend in Barcelona",
            "city_id": "barcelona",
            "city_name": "Barcelona",
            "days": 3,
            "trip_style": TripStyle.MID_RANGE,
        }
        values.update(fields)
        trip = Trip(user_id=user.id, **values)
        db.add(trip)
        db.commit()
        db.refresh(trip)
        return trip
    return _make_trip
