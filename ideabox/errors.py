"""
Error types for Idea Board.

Every failure that crosses the endpoint boundary is an IdeaError subclass.
The ``kind`` tag travels over the wire so HTTP clients can rebuild the
same exception type, and ``http_status`` decides the response code.
"""

from typing import Dict, Type


class IdeaError(Exception):
    """Base class for all idea endpoint failures."""

    kind = "error"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        """JSON body for an error response."""
        return {"error": self.message, "kind": self.kind}

    def __str__(self) -> str:
        return self.message


class InvalidIdentifier(IdeaError):
    """An id string that is not of the form "<table>:<key>"."""

    kind = "invalid_identifier"
    http_status = 400


class InvalidInput(IdeaError):
    """A request body with missing fields, wrong types or an empty title."""

    kind = "invalid_input"
    http_status = 400


class NotFound(IdeaError):
    """A well-formed id that names no stored record."""

    kind = "not_found"
    http_status = 404


class StorageFailure(IdeaError):
    """The underlying store call itself failed."""

    kind = "storage_failure"
    http_status = 500


ERROR_KINDS: Dict[str, Type[IdeaError]] = {
    cls.kind: cls
    for cls in (InvalidIdentifier, InvalidInput, NotFound, StorageFailure)
}


def error_from_dict(data: dict) -> IdeaError:
    """
    Rebuild an IdeaError from an error response body.

    Unknown or missing kinds fall back to the IdeaError base class.
    """
    cls = ERROR_KINDS.get(data.get("kind", ""), IdeaError)
    return cls(data.get("error") or "Unknown error")
