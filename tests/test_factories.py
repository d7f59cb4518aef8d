"""Tests for database location resolution."""

from rentflow.database.factories import create_sqlite_database, resolve_database_path


def test_explicit_path_wins(tmp_path, monkeypatch):
    monkeypatch.setenv("RENTFLOW_DB_PATH", str(tmp_path / "env.db"))
    assert resolve_database_path(str(tmp_path / "cli.db")) == tmp_path / "cli.db"


def test_environment_variable(tmp_path, monkeypatch):
    monkeypatch.setenv("RENTFLOW_DB_PATH", str(tmp_path / "env.db"))
    assert resolve_database_path() == tmp_path / "env.db"


def test_default_location_under_home(tmp_path, monkeypatch):
    monkeypatch.delenv("RENTFLOW_DB_PATH", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    path = resolve_database_path()

    assert path == tmp_path / ".rentflow" / "rentflow.db"
    assert path.parent.is_dir()


def test_tilde_is_expanded_and_parent_created(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))

    path = resolve_database_path("~/data/rent/rentflow.db")

    assert path == tmp_path / "data" / "rent" / "rentflow.db"
    assert path.parent.is_dir()


def test_create_sqlite_database_uses_resolved_path(tmp_path):
    db = create_sqlite_database(str(tmp_path / "nested" / "rent.db"))
    try:
        assert db.save("theme", True) is True
    finally:
        db.disconnect()
    assert (tmp_path / "nested" / "rent.db").exists()
