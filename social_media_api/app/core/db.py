"""
SQLite database integration and simple migration system.

The API keeps a single process-wide connection: it is opened on first
use by ``get_connection`` and reused for every request until
``close_connection`` is called at shutdown.  ``init_db`` applies the
schema migrations on application start.  Applied migration versions
are stored in the ``migrations`` table and new ones are executed in
order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings


logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value.
SQLITE_INTEGER_MIN = -(2**63)
SQLITE_INTEGER_MAX = 2**63 - 1

_connection: Optional[sqlite3.Connection] = None


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    ``:memory:`` and absolute paths are returned as is, anything else
    is resolved relative to the project root.
    """
    db_url = settings.database_url
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # social_media_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Return the shared SQLite connection, opening it if necessary.

    Requests may be served from different threads, so the connection
    is opened with ``check_same_thread=False``.  Rows are returned as
    ``sqlite3.Row`` objects keyed by column name.
    """
    global _connection
    if _connection is None:
        db_path = get_database_path()
        conn = sqlite3.connect(db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        # Foreign key support is off by default in SQLite and must be
        # enabled per connection.
        conn.execute("PRAGMA foreign_keys = ON")
        _connection = conn
        logger.info("Opened database connection to %s", db_path)
    return _connection


def close_connection() -> None:
    """Close the shared connection.  The next call reopens it."""
    global _connection
    if _connection is not None:
        _connection.close()
        _connection = None
        logger.info("Database connection closed")


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor on the shared connection.

    The statement is committed when the block exits normally and
    rolled back if it raises.  The connection itself stays open.
    """
    conn = get_connection()
    cursor = conn.cursor()
    try:
        yield cursor
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cursor.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer migration from the
    list below.  New migrations must be appended with an incremented
    version number.
    """
    migrations: list[tuple[int, str]] = [
        # Migration 1: Initial schema
        (
            1,
            """
            CREATE TABLE IF NOT EXISTS account (
                account_id INTEGER PRIMARY KEY AUTOINCREMENT,
                username TEXT NOT NULL UNIQUE,
                password TEXT NOT NULL
            );

            CREATE TABLE IF NOT EXISTS message (
                message_id INTEGER PRIMARY KEY AUTOINCREMENT,
                posted_by INTEGER NOT NULL,
                message_text TEXT NOT NULL,
                time_posted_epoch INTEGER,
                FOREIGN KEY(posted_by) REFERENCES account(account_id)
            );
            """,
        ),
        # Migration 2: index for per-account message listings
        (
            2,
            """
            CREATE INDEX IF NOT EXISTS idx_message_posted_by ON message(posted_by);
            """,
        ),
    ]

    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in migrations:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
                logger.info("Applied database migration %d", version)
