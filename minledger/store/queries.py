"""Key-value storage queries."""

import sqlite3
from pathlib import Path

from minledger.store.schema import get_db_path, init_database


def _connect(db_path: Path | None = None) -> sqlite3.Connection:
    """Create a database connection, creating the schema if needed.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Database connection.
    """
    if db_path is None:
        db_path = get_db_path()
    init_database(db_path)
    return sqlite3.connect(db_path)


def get_item(key: str, db_path: Path | None = None) -> str | None:
    """Read a stored value.

    Args:
        key: Storage key.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Stored value, or None if the key is absent.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    conn = _connect(db_path)
    try:
        row = conn.execute("SELECT value FROM storage WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None
    finally:
        conn.close()


def set_item(key: str, value: str, db_path: Path | None = None) -> None:
    """Write a value, replacing any existing one.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    conn = _connect(db_path)
    try:
        conn.execute(
            "INSERT INTO storage (key, value) VALUES (?, ?) ON CONFLICT(key) DO UPDATE SET value = excluded.value",
            (key, value),
        )
        conn.commit()
    except sqlite3.Error:
        conn.rollback()
        raise
    finally:
        conn.close()
