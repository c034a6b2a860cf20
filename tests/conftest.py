import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from open_hours.db import Base
from open_hours.dependencies import get_db
from open_hours.main import app
from open_hours.schedule import parse_restaurant
from open_hours.utils import seed_restaurants

RESTAURANT_LINES = [
    ("Burger Bar", "Mon,Tue,Wed,Thu,Sun|11:00-22:00;Fri,Sat|11:00-0:00"),
    ("Dinner Only", "Mon,Tue,Wed,Thu,Fri,Sat,Sun|16:00-20:00"),
    ("Night Owl", "Sat|20:00-04:00;Sun|10:00-14:00"),
    ("Early Bird", "Mon,Sun|0:00-5:00;Wed|4:59-5:01"),
    ("Late Breakfast", "Tue|05:00-11:00;Sun|23:00-5:00"),
    ("Sunday Brunch", "Sun|09:30-14:30"),
]


@pytest.fixture
def restaurants():
    return [parse_restaurant(line) for line in RESTAURANT_LINES]


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_db(db, restaurants):
    seed_restaurants(db, restaurants)
    return db


@pytest.fixture
def client(seeded_db):
    def override_get_db():
        yield seeded_db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
