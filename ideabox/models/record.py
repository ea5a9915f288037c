"""
Store-level addressing for Idea Board.

A record lives in a table under a key. On the wire the pair is written as
a single composite string, "<table>:<key>", and RecordId.parse is the only
place that string is taken apart.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from ideabox.errors import InvalidIdentifier


@dataclass(frozen=True)
class RecordId:
    """
    Address of one stored document.

    Attributes:
        table: Collection name (e.g., "ideas").
        key: Record key, unique within the table.
    """

    table: str
    key: str

    @classmethod
    def parse(cls, text: str) -> "RecordId":
        """
        Parse a composite "<table>:<key>" identifier.

        Raises:
            InvalidIdentifier: Unless the text splits on ":" into exactly
                two non-empty parts.
        """
        if not isinstance(text, str):
            raise InvalidIdentifier(f"Invalid ID format: {text!r}")

        parts = text.split(":")
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise InvalidIdentifier(f"Invalid ID format: {text}")

        return cls(table=parts[0], key=parts[1])

    def __str__(self) -> str:
        return f"{self.table}:{self.key}"


@dataclass
class Record:
    """A document as held by a record store: its address plus its body."""

    id: RecordId
    content: Dict[str, Any] = field(default_factory=dict)
