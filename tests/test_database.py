"""Tests for the SQLAlchemy document store."""

from rentflow.database.base import TENANTS_NAMESPACE, THEME_NAMESPACE
from rentflow.database.factories import create_sqlite_database
from rentflow.database.models import Document


class TestDocumentStore:
    """Tests for load/save on SQLAlchemyDatabase."""

    def test_load_missing_namespace_returns_none(self, temp_db):
        """Nothing stored reads as None."""
        assert temp_db.load(TENANTS_NAMESPACE) is None

    def test_save_then_load(self, temp_db):
        """A saved document loads back unchanged."""
        payload = [{"id": "t1", "name": "Yab", "payments": {"2024-Jan": True}}]
        assert temp_db.save(TENANTS_NAMESPACE, payload) is True
        assert temp_db.load(TENANTS_NAMESPACE) == payload

    def test_save_overwrites(self, temp_db):
        """Each save replaces the whole document."""
        temp_db.save(THEME_NAMESPACE, False)
        temp_db.save(THEME_NAMESPACE, True)
        assert temp_db.load(THEME_NAMESPACE) is True

    def test_unserializable_payload_is_reported(self, temp_db):
        """Values JSON cannot encode are rejected without raising."""
        assert temp_db.save(TENANTS_NAMESPACE, {"when": object()}) is False
        assert temp_db.load(TENANTS_NAMESPACE) is None

    def test_malformed_json_reads_as_none(self, temp_db):
        """Corrupt stored text is treated like a missing document."""
        session = temp_db._get_session()
        session.add(Document(namespace=TENANTS_NAMESPACE, payload="[{not json"))
        session.commit()

        assert temp_db.load(TENANTS_NAMESPACE) is None

    def test_documents_survive_reconnect(self, temp_db):
        """A second handle on the same file sees saved documents."""
        temp_db.save(TENANTS_NAMESPACE, [{"id": "t1"}])

        other = create_sqlite_database(database_path=temp_db.database_path)
        try:
            assert other.load(TENANTS_NAMESPACE) == [{"id": "t1"}]
        finally:
            other.disconnect()

    def test_load_sees_writes_from_another_handle(self, temp_db):
        """Loads are not served from a stale session cache."""
        temp_db.save(THEME_NAMESPACE, False)
        assert temp_db.load(THEME_NAMESPACE) is False

        other = create_sqlite_database(database_path=temp_db.database_path)
        try:
            other.save(THEME_NAMESPACE, True)
        finally:
            other.disconnect()

        assert temp_db.load(THEME_NAMESPACE) is True
