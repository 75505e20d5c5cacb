import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Must be set before the application modules create their engine.
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"

from inventory_service.database import Base, get_db  # noqa: E402
from inventory_service.main import app  # noqa: E402


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def override_db(session_factory):
    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    try:
        yield
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(override_db):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_supplier(client):
    def _make(name="Acme Supply", **fields):
        response = client.post("/suppliers", json={"name": name, **fields})
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _make


@pytest.fixture()
def make_item(client):
    def _make(supplier_id, name="Bolt", category="Hardware", **fields):
        response = client.post(
            "/inventory",
            json={"name": name, "category": category, **fields},
            headers={"X-Supplier-ID": str(supplier_id)},
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _make


@pytest.fixture()
def anyio_backend():
    return "asyncio"
