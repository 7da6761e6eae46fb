# tests/conftest.py
"""Shared fixtures: an in-memory SQLite database and a logged-in TestClient."""

import sys
import os
import tempfile
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Must be set before truckwash.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="truckwash-logs-")
os.environ["SECRET_KEY"] = "test-secret"
os.environ.pop("SEED_ADMIN_EMAIL", None)
os.environ.pop("SEED_ADMIN_PASSWORD", None)

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from truckwash.database import Base, SessionLocal, create_tables, engine, get_db
from truckwash.models.company import Company
from truckwash.models.wash_type import WashType
from truckwash.schemas.user import UserCreate
from truckwash.services.auth_service import create_user
from truckwash.services.company_service import ensure_unconfirmed_company
from truckwash.utils.clock import utcnow

TEST_PASSWORD = "correct-horse"


@pytest.fixture
def db():
    create_tables()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    ensure_unconfirmed_company(session)
    yield session
    session.close()


@pytest.fixture
def company(db):
    c = Company(name="Fleet Transport Ltd", transport_manager="Sarah Hughes", created_at=utcnow())
    db.add(c)
    db.commit()
    return c


@pytest.fixture
def other_company(db):
    c = Company(name="Northern Haulage", created_at=utcnow())
    db.add(c)
    db.commit()
    return c


@pytest.fixture
def wash_type(db):
    wt = WashType(description="Tractor Unit Wash", price=Decimal("25.00"))
    db.add(wt)
    db.commit()
    return wt


@pytest.fixture
def client(db):
    from truckwash.main import app

    def override_get_db():
        session = SessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def login(client, db):
    """login("admin") creates a user with that role and signs the client in."""

    def _login(role, company_id=None):
        email = f"{role.lower()}@example.com"
        create_user(db, UserCreate(email=email, password=TEST_PASSWORD, role=role, company_id=company_id))
        resp = client.post("/api/login", json={"email": email, "password": TEST_PASSWORD})
        assert resp.status_code == 200
        return client

    return _login
