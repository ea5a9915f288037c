"""Build the configured record store."""

from ideabox.config import IDEAS_DB_PATH, IDEAS_STORAGE
from ideabox.storage.airtable import AirtableRecordStore
from ideabox.storage.base import RecordStore
from ideabox.storage.memory import MemoryRecordStore
from ideabox.storage.sqlite import SqliteRecordStore


def create_store(backend: str = None, db_path: str = None) -> RecordStore:
    """
    Create a record store for the given backend name.

    Args:
        backend: "sqlite", "airtable" or "memory". Defaults to config.IDEAS_STORAGE.
        db_path: SQLite file for the sqlite backend. Defaults to config.IDEAS_DB_PATH.

    Raises:
        ValueError: For an unknown backend name.
    """
    backend = (backend or IDEAS_STORAGE).lower()

    if backend == "sqlite":
        return SqliteRecordStore(db_path or IDEAS_DB_PATH)
    if backend == "airtable":
        return AirtableRecordStore()
    if backend == "memory":
        return MemoryRecordStore()

    raise ValueError(f"Unknown storage backend: {backend}")
