"""Pytest configuration and fixtures for the Stockroom test suite."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool

from stockroom.models import Beverage, Material
from stockroom.models.base import Base
from stockroom.models import tables  # noqa: F401
from stockroom.services.repository import SqlRepository
from stockroom.utils.config import reset_config


@pytest.fixture(scope="function")
def test_db():
    """Provide a clean in-memory database for each test function.

    This fixture:
    1. Creates an in-memory SQLite database
    2. Creates the materiais and bebidas tables
    3. Patches the global session factory so session_scope() uses it
    4. Drops all tables after the test completes
    """
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)

    session_factory = sessionmaker(bind=engine, expire_on_commit=False)
    Session = scoped_session(session_factory)

    import stockroom.services.database as db_module

    original_get_session_factory = db_module.get_session_factory
    db_module.get_session_factory = lambda: Session

    yield Session

    Session.remove()
    Base.metadata.drop_all(engine)
    db_module.get_session_factory = original_get_session_factory


@pytest.fixture
def repository(test_db):
    """SqlRepository on the in-memory database."""
    return SqlRepository()


class NotificationCollector:
    """Notifier that records every notification it receives."""

    def __init__(self):
        self.received = []

    def __call__(self, notification):
        self.received.append(notification)

    @property
    def levels(self):
        return [n.level.value for n in self.received]

    def clear(self):
        self.received.clear()


@pytest.fixture
def notifications():
    return NotificationCollector()


@pytest.fixture
def make_material():
    """Factory for Material items with sensible defaults."""
    counter = {"n": 0}

    def _make(name="Garfo", current_quantity=10, reorder_point=5, category="Talheres",
              sector="Salão", image="", id=None):
        counter["n"] += 1
        return Material(
            id=id or f"m-{counter['n']:03d}",
            name=name,
            current_quantity=current_quantity,
            reorder_point=reorder_point,
            image=image,
            category=category,
            sector=sector,
        )

    return _make


@pytest.fixture
def make_beverage():
    """Factory for Beverage items with sensible defaults."""
    counter = {"n": 0}

    def _make(name="Coca-Cola", current_quantity=24, reorder_point=12, category="Refrigerantes",
              image="", id=None):
        counter["n"] += 1
        return Beverage(
            id=id or f"b-{counter['n']:03d}",
            name=name,
            current_quantity=current_quantity,
            reorder_point=reorder_point,
            image=image,
            category=category,
        )

    return _make


@pytest.fixture
def supabase_client():
    """MagicMock standing in for a supabase.Client.

    The query builder methods return the same table mock so chained calls
    (table().update().eq().execute()) can be inspected.
    """
    client = MagicMock()
    table = client.table.return_value
    for method in ("select", "insert", "update", "delete", "eq"):
        getattr(table, method).return_value = table
    table.execute.return_value = MagicMock(data=[])
    return client


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate tests from the developer's environment variables."""
    for name in ("STOCKROOM_ENV", "SUPABASE_URL", "SUPABASE_KEY", "STOCKROOM_IMAGE_BUCKET",
                 "STOCKROOM_LOG_LEVEL", "STOCKROOM_EXPORT_DIR"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
