"""Database layer for rentflow application."""

from rentflow.database.base import Database
from rentflow.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
