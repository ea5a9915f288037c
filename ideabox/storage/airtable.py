"""
Airtable storage backend for Idea Board.

Implements the RecordStore interface using Airtable as the persistence layer.
Uses the Airtable REST API for all operations.

Airtable API Documentation: https://airtable.com/developers/web/api/introduction

=============================================================================
AIRTABLE SCHEMA
=============================================================================

Each record table (e.g. "ideas") needs a single column:

| Column Name | Field Type | Description                          |
|-------------|------------|--------------------------------------|
| document    | Long text  | JSON-encoded document body           |

The record key is Airtable's own record id (e.g. "recA1b2C3d4E5f6G7"),
so an idea id looks like "ideas:recA1b2C3d4E5f6G7".

=============================================================================
"""

import json
import logging
import time
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from ideabox.config import (
    AIRTABLE_API_KEY,
    AIRTABLE_BASE_ID,
    REQUEST_TIMEOUT,
)
from ideabox.errors import StorageFailure
from ideabox.models.record import Record, RecordId
from ideabox.storage.base import RecordStore

logger = logging.getLogger(__name__)

DOCUMENT_FIELD = "document"


class AirtableRecordStore(RecordStore):
    """
    Airtable-backed record store.

    Every operation is a single REST call, except delete, which reads the
    record first so the removed document can be returned.

    Configuration is pulled from environment variables via ideabox.config:
    - AIRTABLE_API_KEY: API key for authentication
    - AIRTABLE_BASE_ID: Base ID (starts with "app")
    """

    # Airtable API base URL
    API_BASE = "https://api.airtable.com/v0"

    # Rate limiting: Airtable allows 5 requests per second
    REQUEST_DELAY = 0.25  # 250ms between requests to stay under limit

    # Largest page Airtable returns from a list call
    PAGE_SIZE = 100

    def __init__(
        self,
        api_key: str = None,
        base_id: str = None,
        timeout: int = None,
        session: requests.Session = None,
    ):
        """
        Initialize AirtableRecordStore.

        Args:
            api_key: Airtable API key. Defaults to config.AIRTABLE_API_KEY.
            base_id: Airtable base ID. Defaults to config.AIRTABLE_BASE_ID.
            timeout: Request timeout in seconds. Defaults to config.REQUEST_TIMEOUT.
            session: requests session to reuse; one is created lazily otherwise.
        """
        # Use provided values, or fall back to config if None (not empty string)
        self.api_key = api_key if api_key is not None else AIRTABLE_API_KEY
        self.base_id = base_id if base_id is not None else AIRTABLE_BASE_ID
        self.timeout = timeout if timeout is not None else REQUEST_TIMEOUT

        self._session = session
        self._last_request_time = 0.0

    @property
    def name(self) -> str:
        return "airtable"

    @property
    def session(self) -> requests.Session:
        """HTTP session, opened on first use and kept for the process lifetime."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    @property
    def _headers(self) -> Dict[str, str]:
        """Construct headers for API requests."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _table_url(self, table: str, key: str = None) -> str:
        """URL of a table, or of one record in it."""
        url = f"{self.API_BASE}/{self.base_id}/{quote(table, safe='')}"
        if key is not None:
            url = f"{url}/{quote(key, safe='')}"
        return url

    def _rate_limit(self) -> None:
        """Enforce rate limiting between requests."""
        now = time.time()
        elapsed = now - self._last_request_time
        if elapsed < self.REQUEST_DELAY:
            time.sleep(self.REQUEST_DELAY - elapsed)
        self._last_request_time = time.time()

    def _validate_config(self) -> None:
        """Validate that required configuration is present."""
        if not self.api_key:
            raise StorageFailure("AIRTABLE_API_KEY is not configured")
        if not self.base_id:
            raise StorageFailure("AIRTABLE_BASE_ID is not configured")

    def _request(
        self,
        method: str,
        url: str,
        action: str,
        allow_missing: bool = False,
        **kwargs,
    ) -> Optional[Dict[str, Any]]:
        """
        Perform one API call and return the decoded JSON body.

        Args:
            method: HTTP method.
            url: Request URL.
            action: Operation name used in error messages.
            allow_missing: Return None on HTTP 404 instead of failing.

        Raises:
            StorageFailure: On transport errors and non-2xx responses.
        """
        self._validate_config()
        self._rate_limit()

        try:
            response = self.session.request(
                method,
                url,
                headers=self._headers,
                timeout=self.timeout,
                **kwargs,
            )
            if allow_missing and response.status_code == 404:
                return None
            response.raise_for_status()
            return response.json()

        except requests.RequestException as e:
            logger.error("Airtable %s failed: %s", action, e)
            raise StorageFailure(f"Storage {action} failed: {e}") from e
        except ValueError as e:
            logger.error("Airtable %s returned invalid JSON: %s", action, e)
            raise StorageFailure(f"Storage {action} failed: invalid response") from e

    # =========================================================================
    # Serialization: Record <-> Airtable
    # =========================================================================

    @staticmethod
    def content_to_airtable_fields(content: Dict[str, Any]) -> Dict[str, Any]:
        """
        Convert a document body to Airtable field format.

        Args:
            content: Document body.

        Returns:
            Dictionary of field names to values for Airtable.
        """
        return {DOCUMENT_FIELD: json.dumps(content, ensure_ascii=False)}

    @staticmethod
    def airtable_record_to_record(table: str, record: Dict[str, Any]) -> Record:
        """
        Convert an Airtable record to a Record.

        Args:
            table: Table the record was read from.
            record: Airtable record with "id" and "fields".

        Raises:
            StorageFailure: If the document column holds invalid JSON.
        """
        fields = record.get("fields", {})
        raw = fields.get(DOCUMENT_FIELD) or "{}"
        try:
            content = json.loads(raw)
        except ValueError as e:
            raise StorageFailure(
                f"Record {table}:{record.get('id')} holds an invalid document"
            ) from e

        return Record(id=RecordId(table=table, key=record["id"]), content=content)

    # =========================================================================
    # RecordStore Interface Implementation
    # =========================================================================

    def create(self, table: str, content: Dict[str, Any]) -> Record:
        data = self._request(
            "POST",
            self._table_url(table),
            "create",
            json={"fields": self.content_to_airtable_fields(content)},
        )
        return self.airtable_record_to_record(table, data)

    def select_all(self, table: str) -> List[Record]:
        records = []
        params = {"pageSize": self.PAGE_SIZE}

        # Airtable pages its list responses; follow "offset" until it stops
        while True:
            data = self._request("GET", self._table_url(table), "select", params=params)
            for record in data.get("records", []):
                records.append(self.airtable_record_to_record(table, record))

            offset = data.get("offset")
            if not offset:
                break
            params = {"pageSize": self.PAGE_SIZE, "offset": offset}

        return records

    def select_one(self, table: str, key: str) -> Optional[Record]:
        data = self._request(
            "GET",
            self._table_url(table, key),
            "select",
            allow_missing=True,
        )
        if data is None:
            return None
        return self.airtable_record_to_record(table, data)

    def update(self, table: str, key: str, content: Dict[str, Any]) -> Optional[Record]:
        # PUT is Airtable's destructive update: unspecified fields are cleared
        data = self._request(
            "PUT",
            self._table_url(table, key),
            "update",
            allow_missing=True,
            json={"fields": self.content_to_airtable_fields(content)},
        )
        if data is None:
            return None
        return self.airtable_record_to_record(table, data)

    def delete(self, table: str, key: str) -> Optional[Record]:
        existing = self.select_one(table, key)
        if existing is None:
            return None

        data = self._request(
            "DELETE",
            self._table_url(table, key),
            "delete",
            allow_missing=True,
        )
        if data is None:
            return None
        return existing

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
