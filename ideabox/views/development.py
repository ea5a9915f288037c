"""
State for the idea development page.

The page shows one idea read-only (title, description, tags) and lets the
user grow its "what must be true" checklist and its development notes.
There is no save button: every edit sends the whole current state to the
update endpoint straight away.

At most one save per idea is in flight. Edits made while a save is running
only replace the pending payload, and the newest pending payload is sent
when the running save completes, so the store always ends up with the
latest edit. Saves are also numbered, and a completion older than the
newest one already applied is dropped.
"""

import logging
import threading
from concurrent.futures import Executor
from typing import List, Optional, Tuple

from ideabox.errors import IdeaError
from ideabox.models.idea import Idea
from ideabox.views.states import ERROR, LOADING, READY

logger = logging.getLogger(__name__)


class IdeaDevelopmentView:
    """
    Edit buffers and auto-save bookkeeping for one idea.

    Args:
        api: Anything with the IdeaService method set (service or client).
        id: Composite id of the idea to develop.
        executor: Optional executor to run saves in the background. Without
            one, each save runs to completion inside the edit call.
    """

    def __init__(self, api, id: str, executor: Optional[Executor] = None):
        self.api = api
        self.id = id
        self.executor = executor

        self.state = LOADING
        self.error = ""
        self.idea: Optional[Idea] = None

        self.what_must_be_true: List[str] = []
        self.development_notes = ""

        self.save_error = ""
        self._lock = threading.Lock()
        self._next_seq = 0
        self._applied_seq = 0
        self._in_flight = set()
        self._pending: Optional[dict] = None

    # =========================================================================
    # Loading
    # =========================================================================

    def load(self) -> None:
        """Fetch the idea and seed the edit buffers from it."""
        self.state = LOADING
        try:
            idea = self.api.get(self.id)
        except IdeaError as e:
            logger.warning("Loading idea %s failed: %s", self.id, e)
            self.error = f"Failed to load idea: {e}"
            self.state = ERROR
            return

        self.idea = idea
        self.what_must_be_true = list(idea.what_must_be_true)
        self.development_notes = idea.development_notes
        self.error = ""
        self.state = READY

    # =========================================================================
    # Edits
    # =========================================================================

    def add_statement(self, text: str) -> bool:
        """Append a statement; blank input is ignored and nothing is saved."""
        if not text.strip():
            return False
        self.what_must_be_true.append(text)
        self._auto_save()
        return True

    def edit_statement(self, index: int, text: str) -> None:
        self.what_must_be_true[index] = text
        self._auto_save()

    def remove_statement(self, index: int) -> None:
        del self.what_must_be_true[index]
        self._auto_save()

    def set_notes(self, text: str) -> None:
        self.development_notes = text
        self._auto_save()

    # =========================================================================
    # Auto-save
    # =========================================================================

    @property
    def saving(self) -> bool:
        """True while a save is running or waiting to be sent."""
        with self._lock:
            return bool(self._in_flight) or self._pending is not None

    @property
    def last_applied(self) -> int:
        """Sequence number of the newest save whose result was applied."""
        return self._applied_seq

    def begin_save(self) -> int:
        """Allocate the next save sequence number and mark it in flight."""
        with self._lock:
            return self._begin_locked()

    def _begin_locked(self) -> int:
        self._next_seq += 1
        self._in_flight.add(self._next_seq)
        return self._next_seq

    def complete_save(
        self,
        seq: int,
        idea: Optional[Idea] = None,
        error: Optional[IdeaError] = None,
    ) -> bool:
        """
        Record the outcome of save ``seq``.

        Returns:
            True if the outcome was applied, False if it was stale.
        """
        with self._lock:
            self._in_flight.discard(seq)
            if seq < self._applied_seq:
                logger.debug("Dropping stale save %d (applied %d)", seq, self._applied_seq)
                return False
            self._applied_seq = seq

        if error is not None:
            self.save_error = f"Failed to save: {error}"
        else:
            self.save_error = ""
            self.idea = idea
        return True

    def _payload(self) -> dict:
        idea = self.idea
        return {
            "id": idea.id,
            "title": idea.title,
            "description": idea.description,
            "tags": list(idea.tags),
            "what_must_be_true": list(self.what_must_be_true),
            "development_notes": self.development_notes,
        }

    def _auto_save(self) -> None:
        """Send the entire current state, or queue it behind the running save."""
        if self.state != READY or self.idea is None:
            return

        payload = self._payload()
        with self._lock:
            if self._in_flight:
                self._pending = payload
                return
            seq = self._begin_locked()

        self._send(seq, payload)

    def _send(self, seq: int, payload: dict) -> None:
        if self.executor is None:
            self._on_saved(seq, self._run_update(payload))
            return

        future = self.executor.submit(self._run_update, payload)
        future.add_done_callback(lambda f: self._on_saved(seq, f.result()))

    def _run_update(self, payload: dict) -> Tuple[Optional[Idea], Optional[IdeaError]]:
        """Call the update endpoint; every failure comes back as an IdeaError."""
        try:
            return self.api.update(**payload), None
        except IdeaError as e:
            logger.warning("Saving idea %s failed: %s", self.id, e)
            return None, e
        except Exception as e:
            logger.exception("Saving idea %s failed unexpectedly", self.id)
            return None, IdeaError(str(e))

    def _on_saved(self, seq: int, outcome: Tuple[Optional[Idea], Optional[IdeaError]]) -> None:
        idea, error = outcome
        with self._lock:
            payload, self._pending = self._pending, None
            next_seq = self._begin_locked() if payload is not None else None

        self.complete_save(seq, idea=idea, error=error)

        if payload is not None:
            self._send(next_seq, payload)
