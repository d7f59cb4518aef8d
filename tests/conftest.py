"""Shared pytest fixtures for rentflow tests."""

import tempfile
import os
from datetime import datetime, UTC
from decimal import Decimal
from types import SimpleNamespace
import pytest

from rentflow.database.base import Database, PROPERTIES_NAMESPACE, TENANTS_NAMESPACE
from rentflow.database.factories import create_sqlite_database
from rentflow.domain.entities import Tenant
from rentflow.domain.ledger import Ledger
from rentflow.domain.preferences import PreferencesService
from rentflow.domain.property import PropertyService
from rentflow.domain.tenant import TenantService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def empty_db(temp_db):
    """Temporary database holding an empty roster and property list."""
    temp_db.save(TENANTS_NAMESPACE, [])
    temp_db.save(PROPERTIES_NAMESPACE, [])
    return temp_db


@pytest.fixture
def tenant_service(empty_db):
    """Create a TenantService over an empty roster."""
    return TenantService(empty_db)


@pytest.fixture
def property_service(empty_db):
    """Create a PropertyService over an empty property list."""
    return PropertyService(empty_db)


@pytest.fixture
def preferences_service(temp_db):
    """Create a PreferencesService with a temporary database."""
    return PreferencesService(temp_db)


@pytest.fixture
def fixed_now():
    """A fixed point in time for audit entries."""
    return datetime(2024, 3, 5, 14, 30, tzinfo=UTC)


@pytest.fixture
def yab():
    """Tenant paid for Jan and Jun 2024."""
    return Tenant(
        id="t2",
        name="Yab",
        rent_amount=Decimal("1000"),
        email="yab@example.com",
        phone="555-0102",
        ledger=Ledger({"2024-Jan": True, "2024-Jun": True}),
    )


class MemoryDatabase(Database):
    """In-memory Database double; set fail_saves to simulate a storage outage."""

    def __init__(self, documents=None, fail_saves=False):
        self.documents = dict(documents or {})
        self.fail_saves = fail_saves
        self.save_calls = 0

    def connect(self) -> None:
        pass

    def disconnect(self) -> None:
        pass

    def initialize_schema(self) -> None:
        pass

    def load(self, namespace):
        return self.documents.get(namespace)

    def save(self, namespace, payload) -> bool:
        self.save_calls += 1
        if self.fail_saves:
            return False
        self.documents[namespace] = payload
        return True


@pytest.fixture
def memory_db():
    """In-memory database with an empty roster and property list."""
    return MemoryDatabase({TENANTS_NAMESPACE: [], PROPERTIES_NAMESPACE: []})


class FakeMessages:
    """Stands in for ``anthropic.Anthropic().messages``."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(content=[SimpleNamespace(type="text", text=self.reply)])


@pytest.fixture
def fake_client():
    """Factory for fake Anthropic clients."""

    def make(reply="", error=None):
        return SimpleNamespace(messages=FakeMessages(reply=reply, error=error))

    return make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
