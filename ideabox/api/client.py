"""
HTTP client for the /api/ideas/* endpoints.

IdeaClient mirrors IdeaService method for method, so the views can be
driven either in-process or against a running server.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from ideabox.config import REQUEST_TIMEOUT
from ideabox.errors import IdeaError, error_from_dict
from ideabox.models.idea import Idea

logger = logging.getLogger(__name__)


class IdeaClient:
    """Calls a running Idea Board server over HTTP."""

    def __init__(
        self,
        base_url: str,
        timeout: int = None,
        session: requests.Session = None,
    ):
        """
        Initialize IdeaClient.

        Args:
            base_url: Server root, e.g. "http://127.0.0.1:5001".
            timeout: Request timeout in seconds. Defaults to config.REQUEST_TIMEOUT.
            session: requests session to reuse.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else REQUEST_TIMEOUT
        self.session = session or requests.Session()

    def _post(self, path: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        """
        POST a JSON body to an endpoint and return the decoded response.

        Raises:
            IdeaError: The subclass named by the response's "kind", or the
                base class for transport failures and non-JSON error bodies.
        """
        url = f"{self.base_url}{path}"

        try:
            response = self.session.post(url, json=payload or {}, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Request to %s failed: %s", url, e)
            raise IdeaError(f"Request to {path} failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            if response.ok:
                raise IdeaError(f"{path} returned a non-JSON body: {e}") from e
            raise IdeaError(f"{path} returned HTTP {response.status_code}") from e

        if response.ok:
            return body

        if not isinstance(body, dict):
            raise IdeaError(f"{path} returned HTTP {response.status_code}")
        raise error_from_dict(body)

    def submit(self, title: str, description: str, tags: List[str]) -> Idea:
        data = self._post(
            "/api/ideas/submit",
            {"title": title, "description": description, "tags": tags},
        )
        return Idea.from_dict(data)

    def list_all(self) -> List[Idea]:
        data = self._post("/api/ideas/all")
        return [Idea.from_dict(item) for item in data]

    def get(self, id: str) -> Idea:
        return Idea.from_dict(self._post("/api/ideas/get", {"id": id}))

    def update(
        self,
        id: str,
        title: str,
        description: str,
        tags: List[str],
        what_must_be_true: List[str],
        development_notes: str,
    ) -> Idea:
        data = self._post(
            "/api/ideas/update",
            {
                "id": id,
                "title": title,
                "description": description,
                "tags": tags,
                "what_must_be_true": what_must_be_true,
                "development_notes": development_notes,
            },
        )
        return Idea.from_dict(data)

    def delete(self, id: str) -> None:
        self._post("/api/ideas/delete", {"id": id})

    def close(self) -> None:
        self.session.close()
