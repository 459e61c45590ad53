"""Shared fixtures: in-memory SQLite with foreign keys on, FastAPI test client."""

import os

# przed importem shop.*: bez postgresa i bez create_all przy starcie
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_CREATE_ALL", "0")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import shop.data.models  # noqa: F401
from shop.data.database import Base, get_db
from shop.services.order_service import OrderService
from shop.services.user_service import UserService


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user_service(db_session):
    return UserService(db_session)


@pytest.fixture
def order_service(db_session):
    return OrderService(db_session)


@pytest.fixture
def make_user(user_service):
    """Creates users with unique emails."""
    counter = {"n": 0}

    def _make(name: str = "Jan Kowalski"):
        counter["n"] += 1
        return user_service.create_user(name, f"user{counter['n']}@example.com")

    return _make


@pytest.fixture
def make_order(order_service):
    def _make(user_id, n_items: int = 2, status: str = "pending"):
        items = [
            {"quantity": i + 1, "unit_price": Decimal("10.50")}
            for i in range(n_items)
        ]
        return order_service.create_order(user_id, status, Decimal("100.00"), items)

    return _make


@pytest.fixture
def count_rows(db_session):
    def _count(model) -> int:
        return db_session.execute(select(func.count()).select_from(model)).scalar_one()

    return _count


@pytest.fixture
def client(session_factory):
    """Test client with get_db pointed at the in-memory database."""
    from shop.main import create_app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app = create_app()
    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def gql(client):
    """POST a GraphQL document and return the decoded JSON body."""

    def _run(query: str, variables: dict | None = None) -> dict:
        response = client.post("/graphql", json={"query": query, "variables": variables or {}})
        assert response.status_code == 200, response.text
        return response.json()

    return _run
