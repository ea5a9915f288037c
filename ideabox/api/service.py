"""
Idea endpoints.

IdeaService holds the five operations behind /api/ideas/*. Each one parses
its input, makes exactly one logical call on the injected record store and
converts the result to public Idea values. Failures are raised as IdeaError
subclasses; the web layer turns them into HTTP responses.
"""

import logging
from typing import List

from ideabox.config import IDEAS_TABLE
from ideabox.errors import NotFound
from ideabox.models.idea import Idea, IdeaRecord, normalize_labels
from ideabox.models.record import Record, RecordId
from ideabox.storage.base import RecordStore

logger = logging.getLogger(__name__)


class IdeaService:
    """
    Submit, list, fetch, update and delete ideas.

    The store is passed in explicitly; the service keeps no other state and
    caches nothing between calls.
    """

    def __init__(self, store: RecordStore, table: str = None):
        """
        Initialize IdeaService.

        Args:
            store: Record store holding the ideas.
            table: Collection name. Defaults to config.IDEAS_TABLE.
        """
        self.store = store
        self.table = table or IDEAS_TABLE

    def _parse_id(self, id: str) -> RecordId:
        """
        Parse an idea id and check it points into the ideas collection.

        Raises:
            InvalidIdentifier: If the id is malformed.
            NotFound: If the id names another table.
        """
        record_id = RecordId.parse(id)
        if record_id.table != self.table:
            raise NotFound(f"Idea not found: {id}")
        return record_id

    @staticmethod
    def _to_idea(record: Record) -> Idea:
        return IdeaRecord.from_stored(record).to_idea()

    def submit(self, title: str, description: str, tags: List[str]) -> Idea:
        """
        Store a new idea with an empty checklist and no notes.

        Returns:
            The stored idea, carrying its newly assigned id.
        """
        Idea(title=title, description=description, tags=tags).validate()

        record = IdeaRecord(
            title=title,
            description=description,
            tags=normalize_labels(tags),
        )
        created = self.store.create(self.table, record.to_content())

        logger.info("Created idea %s", created.id)
        return self._to_idea(created)

    def list_all(self) -> List[Idea]:
        """Return every stored idea; an empty store gives an empty list."""
        return [self._to_idea(record) for record in self.store.select_all(self.table)]

    def get(self, id: str) -> Idea:
        """
        Fetch one idea by its "<table>:<key>" id.

        Raises:
            InvalidIdentifier: If the id is malformed.
            NotFound: If no such idea is stored.
        """
        record_id = self._parse_id(id)

        record = self.store.select_one(record_id.table, record_id.key)
        if record is None:
            raise NotFound(f"Idea not found: {id}")

        return self._to_idea(record)

    def update(
        self,
        id: str,
        title: str,
        description: str,
        tags: List[str],
        what_must_be_true: List[str],
        development_notes: str,
    ) -> Idea:
        """
        Replace every field of a stored idea.

        The id argument decides which record is written; the stored
        document never carries an id of its own.

        Raises:
            InvalidIdentifier: If the id is malformed.
            NotFound: If no such idea is stored.
        """
        record_id = self._parse_id(id)

        Idea(
            title=title,
            description=description,
            tags=tags,
            what_must_be_true=what_must_be_true,
            development_notes=development_notes,
        ).validate()

        record = IdeaRecord(
            title=title,
            description=description,
            tags=normalize_labels(tags),
            what_must_be_true=normalize_labels(what_must_be_true),
            development_notes=development_notes,
        )
        updated = self.store.update(record_id.table, record_id.key, record.to_content())
        if updated is None:
            raise NotFound(f"Idea not found: {id}")

        logger.info("Updated idea %s", record_id)
        return self._to_idea(updated)

    def delete(self, id: str) -> None:
        """
        Delete an idea.

        Deleting an idea that is already gone is not an error.

        Raises:
            InvalidIdentifier: If the id is malformed.
            StorageFailure: If the store call fails.
        """
        record_id = RecordId.parse(id)
        if record_id.table != self.table:
            logger.info("Ignoring delete of %s outside the %s table", id, self.table)
            return

        deleted = self.store.delete(record_id.table, record_id.key)
        if deleted is None:
            logger.info("Idea %s was already deleted", record_id)
        else:
            logger.info("Deleted idea %s", record_id)
