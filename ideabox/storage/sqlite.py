"""
SQLite storage backend for Idea Board.

The default, persistent record store. Every document lives in one SQLite
table as a JSON body; the (table, key) pair is the primary key.

=============================================================================
SQLITE SCHEMA
=============================================================================

| Column | Type | Description                                   |
|--------|------|-----------------------------------------------|
| tbl    | TEXT | Record table, e.g. "ideas"                    |
| key    | TEXT | Record key, unique within tbl                 |
| body   | TEXT | JSON-encoded document                         |

Rows come back in insertion (rowid) order.

=============================================================================
"""

import json
import logging
import sqlite3
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from ideabox.errors import StorageFailure
from ideabox.models.record import Record, RecordId
from ideabox.storage.base import RecordStore, generate_key

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS documents (
    tbl  TEXT NOT NULL,
    key  TEXT NOT NULL,
    body TEXT NOT NULL,
    PRIMARY KEY (tbl, key)
)
"""


class SqliteRecordStore(RecordStore):
    """
    SQLite-backed record store.

    The connection is opened on first use and reused for the lifetime of
    the instance. Flask may serve requests from several threads, so every
    operation runs under a lock on the shared connection.

    Use ``":memory:"`` as the path for a throwaway store (tests).
    """

    def __init__(self, path: str = "ideas.db", timeout: float = 30.0):
        """
        Initialize SqliteRecordStore.

        Args:
            path: Database file, or ":memory:" for a private in-memory database.
            timeout: Seconds to wait on a locked database file.
        """
        self.path = path
        self.timeout = timeout
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return "sqlite"

    def _connect(self) -> sqlite3.Connection:
        """Open the connection and create the schema on first use."""
        if self._conn is None:
            conn = sqlite3.connect(
                self.path,
                timeout=self.timeout,
                check_same_thread=False,
            )
            conn.row_factory = sqlite3.Row
            with conn:
                conn.execute(_SCHEMA)
            self._conn = conn
            logger.info("Opened SQLite record store at %s", self.path)
        return self._conn

    @contextmanager
    def _transaction(self, action: str) -> Iterator[sqlite3.Connection]:
        """
        Run a block in one transaction on the shared connection.

        Commits on success, rolls back on error. Any sqlite3.Error is
        re-raised as StorageFailure.
        """
        with self._lock:
            try:
                conn = self._connect()
                with conn:
                    yield conn
            except sqlite3.Error as e:
                logger.error("SQLite %s failed: %s", action, e)
                raise StorageFailure(f"Storage {action} failed: {e}") from e

    # =========================================================================
    # Serialization: Record <-> row
    # =========================================================================

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> Record:
        record_id = RecordId(table=row["tbl"], key=row["key"])
        try:
            content = json.loads(row["body"])
        except ValueError as e:
            logger.error("Stored document %s is not valid JSON: %s", record_id, e)
            raise StorageFailure(f"Stored document {record_id} is corrupt: {e}") from e
        return Record(id=record_id, content=content)

    @staticmethod
    def _encode(content: Dict[str, Any]) -> str:
        return json.dumps(content, ensure_ascii=False)

    # =========================================================================
    # RecordStore Interface Implementation
    # =========================================================================

    def create(self, table: str, content: Dict[str, Any]) -> Record:
        key = generate_key()
        body = self._encode(content)

        with self._transaction("create") as conn:
            conn.execute(
                "INSERT INTO documents (tbl, key, body) VALUES (?, ?, ?)",
                (table, key, body),
            )

        return Record(id=RecordId(table=table, key=key), content=json.loads(body))

    def select_all(self, table: str) -> List[Record]:
        with self._transaction("select") as conn:
            rows = conn.execute(
                "SELECT tbl, key, body FROM documents WHERE tbl = ? ORDER BY rowid",
                (table,),
            ).fetchall()

        return [self._row_to_record(row) for row in rows]

    def select_one(self, table: str, key: str) -> Optional[Record]:
        with self._transaction("select") as conn:
            row = conn.execute(
                "SELECT tbl, key, body FROM documents WHERE tbl = ? AND key = ?",
                (table, key),
            ).fetchone()

        return self._row_to_record(row) if row else None

    def update(self, table: str, key: str, content: Dict[str, Any]) -> Optional[Record]:
        body = self._encode(content)

        with self._transaction("update") as conn:
            cursor = conn.execute(
                "UPDATE documents SET body = ? WHERE tbl = ? AND key = ?",
                (body, table, key),
            )
            if cursor.rowcount == 0:
                return None

        return Record(id=RecordId(table=table, key=key), content=json.loads(body))

    def delete(self, table: str, key: str) -> Optional[Record]:
        with self._transaction("delete") as conn:
            row = conn.execute(
                "SELECT tbl, key, body FROM documents WHERE tbl = ? AND key = ?",
                (table, key),
            ).fetchone()
            if row is None:
                return None
            conn.execute(
                "DELETE FROM documents WHERE tbl = ? AND key = ?",
                (table, key),
            )

        return self._row_to_record(row)

    def close(self) -> None:
        """Close the shared connection; the next call reopens it."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    def count(self) -> int:
        """Return number of stored records across all tables (for testing)."""
        with self._transaction("count") as conn:
            return conn.execute("SELECT COUNT(*) FROM documents").fetchone()[0]
