"""
Store adapter used by the resource services.

``ResourceStore`` describes the handful of persistence operations the
services need; ``SQLiteStore`` implements them on top of the
connection helpers in ``core.db``.  Each call opens its own
connection and commits before returning, so a record written by
``insert`` or ``update`` is visible to the next ``get`` or ``list``.

Table and column names come from the resource descriptors, never
from request data, but they are still quoted because some columns
(``end``) are SQL keywords.  All values are passed as parameters.
"""

from __future__ import annotations

import abc
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from moto_dash_api.app.core.db import get_cursor, init_db

logger = logging.getLogger(__name__)

OrderSpec = Sequence[Tuple[str, str]]


def _quote(identifier: str) -> str:
    return '"' + identifier.replace('"', '""') + '"'


class ResourceStore(abc.ABC):
    """Persistence operations shared by every resource type."""

    @abc.abstractmethod
    def initialise(self) -> None:
        """Prepare the backend (create the schema) before first use."""

    @abc.abstractmethod
    def list(self, table: str, order_by: OrderSpec) -> List[Dict[str, Any]]:
        """Return all records of ``table`` sorted by ``order_by``.

        ``order_by`` is a sequence of ``(column, direction)`` pairs
        where direction is ``"ASC"`` or ``"DESC"``.
        """

    @abc.abstractmethod
    def get(self, table: str, record_id: str) -> Optional[Dict[str, Any]]:
        """Return the record with ``record_id`` or ``None``."""

    @abc.abstractmethod
    def insert(self, table: str, record: Dict[str, Any]) -> None:
        """Insert a complete record (including its ``id``)."""

    @abc.abstractmethod
    def update(self, table: str, record_id: str, fields: Dict[str, Any]) -> int:
        """Set only ``fields`` on the record and return the affected row count."""

    @abc.abstractmethod
    def delete(self, table: str, record_id: str) -> int:
        """Remove the record and return the affected row count."""


class SQLiteStore(ResourceStore):
    """Store adapter backed by a single SQLite database file."""

    def __init__(self, database_path: str):
        self.database_path = database_path

    def initialise(self) -> None:
        logger.info("Using SQLite database at %s", self.database_path)
        init_db(self.database_path)

    def list(self, table: str, order_by: OrderSpec) -> List[Dict[str, Any]]:
        clauses = []
        for column, direction in order_by:
            direction = direction.upper()
            if direction not in {"ASC", "DESC"}:
                raise ValueError(f"Invalid sort direction {direction!r}")
            clauses.append(f"{_quote(column)} {direction}")
        # rows sharing a timestamp come back newest insert first
        clauses.append("rowid DESC")
        query = f"SELECT * FROM {_quote(table)} ORDER BY {', '.join(clauses)}"
        with get_cursor(self.database_path) as cursor:
            rows = cursor.execute(query).fetchall()
        return [dict(row) for row in rows]

    def get(self, table: str, record_id: str) -> Optional[Dict[str, Any]]:
        with get_cursor(self.database_path) as cursor:
            row = cursor.execute(
                f"SELECT * FROM {_quote(table)} WHERE id = ?",
                (record_id,),
            ).fetchone()
        return dict(row) if row else None

    def insert(self, table: str, record: Dict[str, Any]) -> None:
        columns = list(record)
        placeholders = ", ".join("?" for _ in columns)
        statement = (
            f"INSERT INTO {_quote(table)} ({', '.join(_quote(c) for c in columns)}) "
            f"VALUES ({placeholders})"
        )
        with get_cursor(self.database_path) as cursor:
            cursor.execute(statement, [record[c] for c in columns])

    def update(self, table: str, record_id: str, fields: Dict[str, Any]) -> int:
        if not fields:
            return 0
        set_clause = ", ".join(f"{_quote(column)} = ?" for column in fields)
        statement = f"UPDATE {_quote(table)} SET {set_clause} WHERE id = ?"
        with get_cursor(self.database_path) as cursor:
            cursor.execute(statement, [*fields.values(), record_id])
            return cursor.rowcount

    def delete(self, table: str, record_id: str) -> int:
        with get_cursor(self.database_path) as cursor:
            cursor.execute(f"DELETE FROM {_quote(table)} WHERE id = ?", (record_id,))
            return cursor.rowcount
