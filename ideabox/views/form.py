"""State for the "submit your idea" form."""

import logging
from typing import Callable, Optional

from ideabox.errors import IdeaError
from ideabox.models.idea import Idea, parse_tags

logger = logging.getLogger(__name__)

IDLE = "idle"
SUBMITTING = "submitting"

SUCCESS_MESSAGE = "idea submitted successfully"


class IdeaFormView:
    """
    Collects title, description and comma-separated tags and submits them.

    States: idle -> submitting -> idle. The form stays in ``submitting`` for
    the duration of the endpoint call, and a submit started from inside that
    call is refused. After a submit, ``message`` holds either the success
    text or "error: <reason>". A successful submit
    clears every field and calls ``on_success`` so the parent can refresh
    its list.
    """

    def __init__(self, api, on_success: Optional[Callable[[Idea], None]] = None):
        self.api = api
        self.on_success = on_success
        self.state = IDLE
        self.title = ""
        self.description = ""
        self.tags_input = ""
        self.message = ""

    @property
    def is_submitting(self) -> bool:
        return self.state == SUBMITTING

    @property
    def tags(self):
        return parse_tags(self.tags_input)

    def submit(self) -> Optional[Idea]:
        """
        Send the current fields to the submit endpoint.

        Returns:
            The stored idea, or None if the submit failed or one was
            already in flight.
        """
        if self.is_submitting:
            return None

        self.state = SUBMITTING
        try:
            idea = self.api.submit(self.title, self.description, self.tags)
        except IdeaError as e:
            logger.warning("Submit failed: %s", e)
            self.message = f"error: {e}"
            return None
        finally:
            self.state = IDLE

        self.message = SUCCESS_MESSAGE
        self.title = ""
        self.description = ""
        self.tags_input = ""

        if self.on_success:
            self.on_success(idea)
        return idea
