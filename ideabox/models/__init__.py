"""
Data models module.

Defines the Idea entity, its store-side record and record addressing.
"""

from ideabox.models.record import Record, RecordId
from ideabox.models.idea import Idea, IdeaRecord, normalize_labels, parse_tags

__all__ = [
    "Idea",
    "IdeaRecord",
    "Record",
    "RecordId",
    "normalize_labels",
    "parse_tags",
]
