"""
Base storage abstraction for Idea Board.

Defines the abstract interface that all record store backends must implement.
This allows swapping between SQLite, Airtable, an in-memory dict, etc.
"""

import secrets
import string
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ideabox.models.record import Record

# Keys look like the ones the original document engine hands out:
# 20 lowercase alphanumeric characters.
KEY_ALPHABET = string.ascii_lowercase + string.digits
KEY_LENGTH = 20


def generate_key() -> str:
    """Return a fresh random record key."""
    return "".join(secrets.choice(KEY_ALPHABET) for _ in range(KEY_LENGTH))


class RecordStore(ABC):
    """
    Abstract base class for all record store backends.

    A record store keeps JSON-like documents addressed by table name and
    record key. Implementations must provide:
    - create: insert a document under a freshly generated key
    - select_all / select_one: read documents back
    - update: replace a whole document
    - delete: remove a document

    "Not found" is never an error: the single-record operations return None.
    Failures of the backend itself raise StorageFailure.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Return the name of this storage backend.

        Used for logging and debugging.
        """
        pass

    @abstractmethod
    def create(self, table: str, content: Dict[str, Any]) -> Record:
        """
        Insert a new document and assign it a unique key within ``table``.

        Args:
            table: Table to insert into.
            content: Document body.

        Returns:
            The stored record, including its assigned id.
        """
        pass

    @abstractmethod
    def select_all(self, table: str) -> List[Record]:
        """
        Return every document stored under ``table``.

        Order is whatever the backend yields; callers must not rely on it.
        """
        pass

    @abstractmethod
    def select_one(self, table: str, key: str) -> Optional[Record]:
        """
        Return a single document.

        Returns:
            The record if present, None otherwise.
        """
        pass

    @abstractmethod
    def update(self, table: str, key: str, content: Dict[str, Any]) -> Optional[Record]:
        """
        Replace the full document at ``table:key`` with ``content``.

        Returns:
            The new stored record, or None if no such record exists.
            A missing record is never created.
        """
        pass

    @abstractmethod
    def delete(self, table: str, key: str) -> Optional[Record]:
        """
        Remove a document.

        Returns:
            The removed record, or None if it did not exist.
        """
        pass

    def close(self) -> None:
        """Release any connection held by the backend."""
        pass

    def __str__(self) -> str:
        return f"RecordStore({self.name})"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
