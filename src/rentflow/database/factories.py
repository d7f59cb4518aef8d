"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from rentflow.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV = "RENTFLOW_DB_PATH"
DEFAULT_DB_FILE = Path("~/.rentflow/rentflow.db")


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Work out which SQLite file to use and make sure its directory exists.

    An explicit path wins, then RENTFLOW_DB_PATH, then ~/.rentflow/rentflow.db.
    A leading ``~`` is expanded in every case.
    """
    raw = database_path or os.environ.get(DB_PATH_ENV) or DEFAULT_DB_FILE
    path = Path(raw).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file (see resolve_database_path)

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    return SQLAlchemyDatabase(f"sqlite:///{resolve_database_path(database_path)}")
