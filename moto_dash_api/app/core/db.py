"""
SQLite database integration and simple schema versioning.

This module provides the connection factory used by the store adapter
(``get_connection``) and applies the schema on application start
(``init_db``).  Every connection enables foreign key enforcement; the
database file itself is switched to write-ahead logging when it is
initialised.

The migration mechanism stores applied schema versions in the
``migrations`` table and executes new entries of ``MIGRATIONS`` in
order.

``bike_id`` columns intentionally carry no ``REFERENCES`` clause:
dependent records survive the deletion of their bike.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent

_TIMESTAMP_DEFAULT = "(strftime('%Y-%m-%dT%H:%M:%fZ', 'now'))"

MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        f"""
        CREATE TABLE IF NOT EXISTS bikes (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            manufacturer TEXT NOT NULL DEFAULT '',
            model TEXT NOT NULL DEFAULT '',
            year INTEGER NOT NULL,
            mileage INTEGER NOT NULL DEFAULT 0,
            first_registration TEXT NOT NULL DEFAULT '',
            purchase_price REAL NOT NULL DEFAULT 0,
            image TEXT NOT NULL DEFAULT '',
            notes TEXT NOT NULL DEFAULT '',
            created_at TEXT NOT NULL DEFAULT {_TIMESTAMP_DEFAULT},
            updated_at TEXT NOT NULL DEFAULT {_TIMESTAMP_DEFAULT}
        );

        CREATE TABLE IF NOT EXISTS fuel (
            id TEXT PRIMARY KEY,
            bike_id TEXT NOT NULL,
            date TEXT NOT NULL,
            liters REAL NOT NULL DEFAULT 0,
            cost REAL NOT NULL DEFAULT 0,
            distance REAL NOT NULL DEFAULT 0,
            notes TEXT NOT NULL DEFAULT '',
            created_at TEXT NOT NULL DEFAULT {_TIMESTAMP_DEFAULT},
            updated_at TEXT NOT NULL DEFAULT {_TIMESTAMP_DEFAULT}
        );

        CREATE TABLE IF NOT EXISTS maintenance (
            id TEXT PRIMARY KEY,
            bike_id TEXT NOT NULL,
            date TEXT NOT NULL,
            type TEXT NOT NULL,
            mileage INTEGER NOT NULL DEFAULT 0,
            cost REAL NOT NULL DEFAULT 0,
            notes TEXT NOT NULL DEFAULT '',
            created_at TEXT NOT NULL DEFAULT {_TIMESTAMP_DEFAULT},
            updated_at TEXT NOT NULL DEFAULT {_TIMESTAMP_DEFAULT}
        );

        CREATE TABLE IF NOT EXISTS parts (
            id TEXT PRIMARY KEY,
            bike_id TEXT NOT NULL,
            name TEXT NOT NULL,
            manufacturer TEXT NOT NULL DEFAULT '',
            installed_at TEXT NOT NULL DEFAULT '',
            price REAL NOT NULL DEFAULT 0,
            notes TEXT NOT NULL DEFAULT '',
            created_at TEXT NOT NULL DEFAULT {_TIMESTAMP_DEFAULT},
            updated_at TEXT NOT NULL DEFAULT {_TIMESTAMP_DEFAULT}
        );

        CREATE TABLE IF NOT EXISTS tours (
            id TEXT PRIMARY KEY,
            bike_id TEXT NOT NULL,
            name TEXT NOT NULL,
            start TEXT NOT NULL DEFAULT '',
            "end" TEXT NOT NULL DEFAULT '',
            distance REAL NOT NULL DEFAULT 0,
            gpx TEXT NOT NULL DEFAULT '',
            notes TEXT NOT NULL DEFAULT '',
            created_at TEXT NOT NULL DEFAULT {_TIMESTAMP_DEFAULT},
            updated_at TEXT NOT NULL DEFAULT {_TIMESTAMP_DEFAULT}
        );
        """,
    ),
    # Migration 2: indices backing the list orderings and per-bike lookups
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_bikes_created_at ON bikes(created_at);
        CREATE INDEX IF NOT EXISTS idx_fuel_date ON fuel(date, created_at);
        CREATE INDEX IF NOT EXISTS idx_fuel_bike_id ON fuel(bike_id);
        CREATE INDEX IF NOT EXISTS idx_maintenance_date ON maintenance(date, created_at);
        CREATE INDEX IF NOT EXISTS idx_maintenance_bike_id ON maintenance(bike_id);
        CREATE INDEX IF NOT EXISTS idx_parts_bike_id ON parts(bike_id);
        CREATE INDEX IF NOT EXISTS idx_tours_bike_id ON tours(bike_id);
        """,
    ),
]


def get_database_path(database_path: str) -> str:
    """Resolve the path to the SQLite database file.

    Absolute paths are returned unchanged; relative paths are resolved
    against the project root.
    """
    if os.path.isabs(database_path):
        return database_path
    return str((PROJECT_ROOT / database_path).resolve())


def get_connection(database_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name and
    enables foreign key constraints, which SQLite disables by default
    on every new connection.
    """
    conn = sqlite3.connect(database_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor(database_path: str) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed when the block finishes normally and
    rolled back when it raises.
    """
    conn = get_connection(database_path)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(database_path: str) -> None:
    """Initialise the database and apply pending migrations.

    Creates the parent directory and the ``migrations`` table if
    needed, switches the file to WAL mode, checks the current schema
    version and applies any newer entries of ``MIGRATIONS``.
    """
    Path(database_path).parent.mkdir(parents=True, exist_ok=True)

    with get_cursor(database_path) as cursor:
        cursor.execute("PRAGMA journal_mode = WAL")
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied schema migration %s", version)
                current_version = version
