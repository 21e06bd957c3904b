"""
Shared fixtures: an in-memory SQLite database reseeded before every test
and a TestClient whose requests use it.
"""
import os

os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from nc_news.db.data.test_data import data
from nc_news.db.seeds.seed import seed
from nc_news.db.session import get_db, register_engine_events
from nc_news.main import app

engine = register_engine_events(create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
))
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    """Freshly seeded session."""
    session = TestingSessionLocal()
    seed(session, data)
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    """TestClient backed by the seeded test database."""
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
