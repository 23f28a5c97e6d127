import os

# Keep the app off the on-disk database and out of auth for tests
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTH_SECRET"] = ""
os.environ["ENABLE_SEED"] = "0"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import Base
import models  # noqa: F401
from app.deps import get_db


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(db_session):
    from main import app  # local import so the env tweaks above apply

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def seeded(db_session):
    from app.services.transaction_queries import seed_sample_transactions

    assert seed_sample_transactions(db_session) == 5
    return db_session
