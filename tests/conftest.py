import os

# must be set before salon_backend is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["IDENTITY_PROVIDER"] = "local"
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient

import salon_backend.models  # noqa: F401
from salon_backend.database.session import Base, SessionLocal, engine
from salon_backend.main import app
from salon_backend.services.account_service import create_account


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    # no context manager: the lifespan would run init_db against the real settings
    return TestClient(app)


@pytest.fixture
def make_account(db):
    """Create an identity plus profile; returns (user_id, auth headers)."""
    provider = app.state.identity_provider

    def _make(email, role, password="secret123", **profile):
        user, identity = create_account(db, provider, email, password, role, **profile)
        return user.id, {"Authorization": f"Bearer {identity.id_token}"}

    return _make


@pytest.fixture
def owner_headers(make_account):
    return make_account("owner@example.com", "owner", first_name="Olive", last_name="Owner")[1]


@pytest.fixture
def employee_headers(make_account):
    return make_account("staff@example.com", "employee", first_name="Sam", last_name="Staff")[1]


@pytest.fixture
def client_headers(make_account):
    return make_account("client@example.com", "client", first_name="Cleo", last_name="Client")[1]


@pytest.fixture
def make_employee(client, owner_headers):
    def _make(first_name="Ana", last_name="Stylist", **extra):
        payload = {"firstName": first_name, "lastName": last_name, **extra}
        resp = client.post("/api/employees", json=payload, headers=owner_headers)
        assert resp.status_code == 200, resp.text
        return resp.json()["data"]["id"]

    return _make


@pytest.fixture
def make_service(client, owner_headers):
    def _make(name="Haircut", duration=30, price=40, **extra):
        payload = {"name": name, "duration": duration, "price": price, **extra}
        resp = client.post("/api/services", json=payload, headers=owner_headers)
        assert resp.status_code == 200, resp.text
        return resp.json()["data"]["id"]

    return _make
