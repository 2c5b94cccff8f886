"""Database module for the user store.

The user store is a single SQLite table keyed by username. There is no
connection pooling or per-request state: every operation opens a connection,
runs, commits and closes it, so concurrent requests share nothing in-process.
The table's primary key, not the application's existence check, is the
authority on username uniqueness.
"""

import sqlite3
from pathlib import Path

from ..schema import SCHEMA_PATH
from .user import UserStore


def _create_connection(database_path: str) -> sqlite3.Connection:
    """Create a fresh database connection.

    Returns:
        SQLite connection with row_factory set to sqlite3.Row
    """
    db_path = Path(database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    return conn


def init_db(database_path: str) -> None:
    """Initialize database by running schema.sql if not already initialized."""
    conn = _create_connection(database_path)
    try:
        cursor = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='_schema_metadata'"
        )
        if cursor.fetchone():
            # Database already initialized, skip
            return

        with open(SCHEMA_PATH, "r") as f:
            schema_sql = f.read()
        conn.executescript(schema_sql)
        conn.commit()
    finally:
        conn.close()


__all__ = ["UserStore", "init_db"]
