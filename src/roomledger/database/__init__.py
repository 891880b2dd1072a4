"""Database layer for roomledger application."""

from roomledger.database.base import Database
from roomledger.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
