"""State for the list of submitted ideas."""

import logging
from typing import Callable, List, Optional

from ideabox.errors import IdeaError
from ideabox.models.idea import Idea
from ideabox.views.states import ERROR, LOADING, READY

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No ideas submitted yet. Be the first!"


class IdeaListView:
    """
    Fetches every idea and offers per-item navigation and deletion.

    States: loading -> ready | error. Every change of ``refresh_trigger``
    goes with a fresh fetch; nothing is cached between loads.

    Deleting is two-step: request_delete() marks an idea as awaiting
    confirmation, and only confirm_delete() calls the delete endpoint.
    """

    def __init__(self, api, on_change: Optional[Callable[[], None]] = None):
        self.api = api
        self.on_change = on_change
        self.state = LOADING
        self.ideas: List[Idea] = []
        self.error = ""
        self.refresh_trigger = 0
        self.pending_delete: Optional[Idea] = None

    @property
    def is_empty(self) -> bool:
        return self.state == READY and not self.ideas

    def load(self) -> None:
        self.state = LOADING
        try:
            self.ideas = self.api.list_all()
        except IdeaError as e:
            logger.warning("Loading ideas failed: %s", e)
            self.ideas = []
            self.error = f"Failed to load ideas: {e}"
            self.state = ERROR
            return

        self.error = ""
        self.state = READY

    def refresh(self) -> None:
        """Bump the refresh counter and fetch the list again."""
        self.refresh_trigger += 1
        self.load()

    @staticmethod
    def detail_path(idea: Idea) -> Optional[str]:
        """Path of the development page, or None for an idea without an id."""
        if idea.id is None:
            return None
        return f"/ideas/{idea.id}"

    def find(self, id: str) -> Optional[Idea]:
        for idea in self.ideas:
            if idea.id == id:
                return idea
        return None

    def request_delete(self, idea: Idea) -> bool:
        """
        Ask for confirmation before deleting ``idea``.

        Returns:
            False (and nothing pending) for an idea without an id.
        """
        if idea.id is None:
            return False
        self.pending_delete = idea
        return True

    def cancel_delete(self) -> None:
        self.pending_delete = None

    def confirm_delete(self) -> bool:
        """
        Delete the idea awaiting confirmation.

        Returns:
            True if the delete endpoint succeeded. The list is refreshed
            and ``on_change`` called on success; on failure ``error`` is set
            and the list is left as it was.
        """
        idea = self.pending_delete
        if idea is None:
            return False
        self.pending_delete = None

        try:
            self.api.delete(idea.id)
        except IdeaError as e:
            logger.warning("Deleting %s failed: %s", idea.id, e)
            self.error = f"Failed to delete idea: {e}"
            return False

        self.refresh()
        if self.on_change:
            self.on_change()
        return True
