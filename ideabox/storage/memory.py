"""
In-memory storage backend for Idea Board.

Use this for tests and throwaway development servers.
Data is stored in memory and lost when the process ends.
"""

import copy
import threading
from typing import Any, Dict, List, Optional

from ideabox.models.record import Record, RecordId
from ideabox.storage.base import RecordStore, generate_key


class MemoryRecordStore(RecordStore):
    """
    Dict-backed record store.

    Documents are deep-copied on the way in and out, so callers can never
    mutate stored state by holding on to a returned record.
    """

    def __init__(self):
        self._tables: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "memory"

    def _record(self, table: str, key: str, content: Dict[str, Any]) -> Record:
        return Record(id=RecordId(table=table, key=key), content=copy.deepcopy(content))

    def create(self, table: str, content: Dict[str, Any]) -> Record:
        with self._lock:
            rows = self._tables.setdefault(table, {})
            key = generate_key()
            while key in rows:
                key = generate_key()
            rows[key] = copy.deepcopy(content)
            return self._record(table, key, rows[key])

    def select_all(self, table: str) -> List[Record]:
        with self._lock:
            rows = self._tables.get(table, {})
            return [self._record(table, key, content) for key, content in rows.items()]

    def select_one(self, table: str, key: str) -> Optional[Record]:
        with self._lock:
            content = self._tables.get(table, {}).get(key)
            return self._record(table, key, content) if content is not None else None

    def update(self, table: str, key: str, content: Dict[str, Any]) -> Optional[Record]:
        with self._lock:
            rows = self._tables.get(table, {})
            if key not in rows:
                return None
            rows[key] = copy.deepcopy(content)
            return self._record(table, key, rows[key])

    def delete(self, table: str, key: str) -> Optional[Record]:
        with self._lock:
            content = self._tables.get(table, {}).pop(key, None)
            return self._record(table, key, content) if content is not None else None

    def clear(self) -> None:
        """Clear all records (for testing)."""
        with self._lock:
            self._tables.clear()

    def count(self) -> int:
        """Return number of stored records (for testing)."""
        with self._lock:
            return sum(len(rows) for rows in self._tables.values())
