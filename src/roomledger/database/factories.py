"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from roomledger.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV_VAR = "ROOMLEDGER_DB_PATH"


def create_database(database_url: str) -> SQLAlchemyDatabase:
    """Create a database instance for any SQLAlchemy URL."""
    return SQLAlchemyDatabase(database_url)


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks ROOMLEDGER_DB_PATH
            environment variable, then defaults to ~/.roomledger/roomledger.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get(DB_PATH_ENV_VAR)

    if database_path is None:
        # Default to ~/.roomledger/roomledger.db
        home = Path.home()
        db_dir = home / ".roomledger"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "roomledger.db")

    return create_database(f"sqlite:///{database_path}")
