"""
Storage module.

Handles persistence and retrieval of idea documents via SQLite, Airtable
or an in-memory dict.
"""

from ideabox.storage.base import RecordStore, generate_key
from ideabox.storage.sqlite import SqliteRecordStore
from ideabox.storage.airtable import AirtableRecordStore
from ideabox.storage.memory import MemoryRecordStore
from ideabox.storage.factory import create_store

__all__ = [
    "RecordStore",
    "generate_key",
    "SqliteRecordStore",
    "AirtableRecordStore",
    "MemoryRecordStore",
    "create_store",
]
