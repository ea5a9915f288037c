"""
Core data model for Idea Board.

Defines the public Idea value handed to views and HTTP clients, and the
store-side IdeaRecord it is projected from.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Iterable, List, Optional

from ideabox.errors import InvalidInput
from ideabox.models.record import Record, RecordId


def normalize_labels(values: Iterable[str]) -> List[str]:
    """
    Strip each label and drop the empty ones, keeping the given order.

    Args:
        values: Raw labels (tags or checklist statements).

    Returns:
        List of non-empty, stripped labels.
    """
    labels = []
    for value in values:
        value = value.strip()
        if value:
            labels.append(value)
    return labels


def parse_tags(text: str) -> List[str]:
    """Split comma-separated tag input ("a, b,,c" -> ["a", "b", "c"])."""
    return normalize_labels(text.split(","))


@dataclass
class Idea:
    """
    Represents a single idea as seen by views and API clients.

    Attributes:
        id: Composite "<table>:<key>" identifier; None until first persisted.
        title: Short title, must not be blank.
        description: Free text.
        tags: Labels in the order they were typed.
        what_must_be_true: Ordered checklist of statements.
        development_notes: Free-text notes.
    """

    title: str
    description: str = ""
    tags: List[str] = field(default_factory=list)
    what_must_be_true: List[str] = field(default_factory=list)
    development_notes: str = ""
    id: Optional[str] = None

    def validate(self) -> None:
        """
        Validate that required fields are present and valid.

        Raises:
            InvalidInput: If validation fails.
        """
        errors = []

        if not isinstance(self.title, str) or not self.title.strip():
            errors.append("title is required and cannot be empty")

        if not isinstance(self.description, str):
            errors.append("description must be a string")

        if not isinstance(self.development_notes, str):
            errors.append("development_notes must be a string")

        for name in ("tags", "what_must_be_true"):
            value = getattr(self, name)
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                errors.append(f"{name} must be a list of strings")

        if errors:
            raise InvalidInput(f"Idea validation failed: {'; '.join(errors)}")

    def to_dict(self) -> dict:
        """
        Convert Idea to a plain dictionary for JSON responses.

        The id key is left out entirely for an idea that was never stored.
        """
        data = asdict(self)
        if self.id is None:
            del data["id"]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Idea":
        """
        Create an Idea from a dictionary (e.g., a JSON response).

        Documents written before the checklist and notes existed get
        empty defaults for both.
        """
        return cls(
            id=data.get("id"),
            title=data.get("title", ""),
            description=data.get("description", ""),
            tags=list(data.get("tags") or []),
            what_must_be_true=list(data.get("what_must_be_true") or []),
            development_notes=data.get("development_notes") or "",
        )

    @property
    def record_id(self) -> Optional[RecordId]:
        """Parsed form of ``id``, or None for an unsaved idea."""
        if self.id is None:
            return None
        return RecordId.parse(self.id)

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"{self.title} ({len(self.what_must_be_true)} statements)"

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"Idea(id={self.id!r}, title={self.title!r}, tags={self.tags!r})"


@dataclass
class IdeaRecord:
    """
    Store-side representation of an idea.

    Unlike Idea, the id is a RecordId and it is never part of the stored
    document body; the store owns the address.
    """

    title: str
    description: str = ""
    tags: List[str] = field(default_factory=list)
    what_must_be_true: List[str] = field(default_factory=list)
    development_notes: str = ""
    id: Optional[RecordId] = None

    def to_content(self) -> Dict[str, Any]:
        """Document body to hand to a record store."""
        return {
            "title": self.title,
            "description": self.description,
            "tags": list(self.tags),
            "what_must_be_true": list(self.what_must_be_true),
            "development_notes": self.development_notes,
        }

    @classmethod
    def from_stored(cls, record: Record) -> "IdeaRecord":
        """Build an IdeaRecord from a record returned by a store."""
        content = record.content
        return cls(
            id=record.id,
            title=content.get("title", ""),
            description=content.get("description", ""),
            tags=list(content.get("tags") or []),
            what_must_be_true=list(content.get("what_must_be_true") or []),
            development_notes=content.get("development_notes") or "",
        )

    def to_idea(self) -> Idea:
        """Project to the public Idea, rendering the id as "table:key"."""
        return Idea(
            id=str(self.id) if self.id is not None else None,
            title=self.title,
            description=self.description,
            tags=list(self.tags),
            what_must_be_true=list(self.what_must_be_true),
            development_notes=self.development_notes,
        )
