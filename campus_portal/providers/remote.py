import logging
from typing import Dict, List, Optional

import requests

from campus_portal.providers.base import Record, RecordProvider, RecordProviderError

logger = logging.getLogger(__name__)


class RemoteRecordProvider(RecordProvider):
    """
    Record provider backed by a generic REST record API.

    The remote store names fields differently (``Id``, ``courseId``...);
    ``field_map`` maps local snake_case names to remote names and is applied
    in both directions. Unmapped fields pass through unchanged.
    """

    def __init__(
        self,
        resource: str,
        base_url: str,
        table: Optional[str] = None,
        field_map: Optional[Dict[str, str]] = None,
        api_key: str = "",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.resource = resource
        self.table = table or resource
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._to_remote = dict(field_map or {})
        self._to_local = {v: k for k, v in self._to_remote.items()}
        self._session = session or requests.Session()
        if api_key:
            self._session.headers["Authorization"] = f"Bearer {api_key}"

    def _url(self, record_id: Optional[int] = None) -> str:
        if record_id is None:
            return f"{self.base_url}/{self.table}"
        return f"{self.base_url}/{self.table}/{int(record_id)}"

    def to_remote(self, record: Record) -> Record:
        return {self._to_remote.get(k, k): v for k, v in record.items()}

    def to_local(self, record: Record) -> Record:
        return {self._to_local.get(k, k): v for k, v in record.items()}

    def _request(self, method: str, url: str, missing_ok: bool = True, **kwargs):
        """
        Send one request. Returns the decoded ``data`` payload, or None on 404.

        With ``missing_ok=False`` a 404 is an error too: used for collection
        URLs, where it means the table itself is missing.
        """
        try:
            r = self._session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise RecordProviderError(self.resource, f"request failed: {e}") from e

        if r.status_code == 404 and missing_ok:
            return None
        if not r.ok:
            logger.error("%s %s -> %s: %s", method, url, r.status_code, r.text[:200])
            raise RecordProviderError(self.resource, f"remote store returned {r.status_code}")
        if r.status_code == 204 or not r.content:
            return {}

        try:
            body = r.json()
        except ValueError as e:
            raise RecordProviderError(self.resource, "remote store returned invalid JSON") from e
        if isinstance(body, dict) and "data" in body:
            return body["data"]
        return body

    def list(self) -> List[Record]:
        rows = self._request("GET", self._url(), missing_ok=False)
        if not rows:
            return []
        if not isinstance(rows, list):
            raise RecordProviderError(self.resource, "expected a list of records")
        return [self.to_local(row) for row in rows]

    def get(self, record_id: int) -> Optional[Record]:
        row = self._request("GET", self._url(record_id))
        return self.to_local(row) if row else None

    def insert(self, data: Record) -> Record:
        payload = {k: v for k, v in data.items() if k != "id"}
        row = self._request("POST", self._url(), missing_ok=False, json={"record": self.to_remote(payload)})
        if not row:
            raise RecordProviderError(self.resource, "create returned no record")
        return self.to_local(row)

    def update(self, record_id: int, data: Record) -> Optional[Record]:
        payload = {k: v for k, v in data.items() if k != "id"}
        row = self._request("PATCH", self._url(record_id), json={"record": self.to_remote(payload)})
        if row is None:
            return None
        # some stores answer PATCH with an empty body
        return self.to_local(row) if row else self.get(record_id)

    def delete(self, record_id: int) -> Optional[Record]:
        existing = self.get(record_id)
        if existing is None:
            return None
        if self._request("DELETE", self._url(record_id)) is None:
            return None
        return existing
