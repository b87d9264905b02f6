"""
Roster — Employee Directory Client
===================================

What:  Async client for the remote employee collection resource.
How:   Each operation opens a short-lived httpx.AsyncClient, sends one
       request, checks the status, decodes the JSON body and closes the
       client again. Nothing is cached or shared between calls, so
       concurrent operations are independent.
Who:   RosterService, scripts and tests.

Wire contract (relative to the base URL):
    list_all         GET     /
    filter_by_name   GET     /?Name={pattern}
    get_by_id        GET     /{id}
    create           POST    /          {Name, Age, Job, Phone}
    update           PUT     /{id}      {Name, Age, Job, Phone}
    delete           DELETE  /{id}

Error handling:
    non-2xx status       → RemoteError(status, body text or reason phrase)
    network failure      → TransportError
    undecodable body     → DecodeError
    No retries and, unless configured, no timeouts.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, List, Mapping, Optional, Union
from urllib.parse import quote

import httpx

from roster.config import settings
from roster.exceptions import DecodeError, RemoteError, TransportError
from roster.middleware.logging import log_exchange
from roster.middleware.request_id import REQUEST_ID_HEADER, attach_request_id
from roster.schemas.employee import EmployeeRecord
from roster.services.normalizer import normalize

logger = logging.getLogger(__name__)

RawEmployeeRecord = Dict[str, Any]
EmployeeInput = Union[EmployeeRecord, Mapping[str, Any]]


class EmployeeDirectoryClient:
    """
    Translates the roster operations into HTTP requests.

    Args:
        base_url:  Collection resource URL. Defaults to settings.roster_api_url.
        transport: Optional httpx transport (MockTransport, ASGITransport)
                   for tests and the local store.
        headers:   Extra headers sent with every request.
        timeout:   Seconds, or None for no timeout. Defaults to
                   settings.request_timeout.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = settings.request_timeout,
    ):
        self.base_url = (base_url or settings.roster_api_url).rstrip("/")
        self._transport = transport
        self._headers = {"Accept": "application/json"}
        self._headers.update(headers or {})
        self._timeout = timeout

    # ── Operations ────────────────────────────────────────────────────────

    async def list_all(self) -> List[RawEmployeeRecord]:
        """Every record in the collection."""
        response = await self._send("GET", self.base_url)
        return self._decode_list(response)

    async def filter_by_name(self, name_pattern: Optional[str]) -> List[RawEmployeeRecord]:
        """
        Records the store matches against `name_pattern`.

        None or "" behaves exactly like list_all(). Matching rules
        (substring, prefix, exact) belong to the store.
        """
        if not name_pattern:
            return await self.list_all()
        url = f"{self.base_url}?Name={quote(name_pattern, safe='')}"
        response = await self._send("GET", url)
        return self._decode_list(response)

    async def get_by_id(self, employee_id: Any) -> RawEmployeeRecord:
        response = await self._send("GET", self._record_url(employee_id))
        return self._decode_record(response)

    async def create(self, record: EmployeeInput) -> RawEmployeeRecord:
        """
        POST a new record; returns the store's copy including its new id.

        Not idempotent: calling it twice creates two records.

        Raises:
            DecodeError: the store's reply carries no id
        """
        response = await self._send("POST", self.base_url, json=self._payload(record))
        created = self._decode_record(response)
        if created.get("id") is None:
            raise DecodeError(
                "The employee directory did not assign an id to the new record",
                context={"method": "POST", "url": self.base_url},
            )
        return created

    async def update(self, employee_id: Any, record: EmployeeInput) -> RawEmployeeRecord:
        """PUT a full replacement of the record; returns the updated copy."""
        response = await self._send(
            "PUT", self._record_url(employee_id), json=self._payload(record)
        )
        return self._decode_record(response)

    async def delete(self, employee_id: Any) -> None:
        await self._send("DELETE", self._record_url(employee_id))

    @staticmethod
    def normalize(raw: Any) -> EmployeeRecord:
        """Pure field mapping, see roster.services.normalizer."""
        return normalize(raw)

    # ── HTTP plumbing ─────────────────────────────────────────────────────

    @asynccontextmanager
    async def _session(self) -> AsyncGenerator[httpx.AsyncClient, None]:
        """One AsyncClient per operation, closed when the operation ends."""
        async with httpx.AsyncClient(
            transport=self._transport,
            headers=self._headers,
            timeout=self._timeout,
            event_hooks={"request": [attach_request_id]},
        ) as http:
            yield http

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """
        Send one request and return the response once its status is 2xx.

        Raises:
            RemoteError:    non-success status
            TransportError: request failed before a response arrived
        """
        start_time = time.perf_counter()
        async with self._session() as http:
            try:
                response = await http.request(method, url, **kwargs)
            except httpx.RequestError as exc:
                logger.warning("%s %s failed: %s", method, url, exc)
                raise TransportError(
                    f"Could not reach the employee directory: {exc}",
                    context={"method": method, "url": url},
                ) from exc

        duration_ms = (time.perf_counter() - start_time) * 1000
        log_exchange(
            method,
            url,
            response.status_code,
            duration_ms,
            response.request.headers.get(REQUEST_ID_HEADER, ""),
        )

        if not response.is_success:
            raise RemoteError(
                response.status_code,
                self._error_text(response),
                context={"method": method, "url": url},
            )
        return response

    def _record_url(self, employee_id: Any) -> str:
        if employee_id is None or str(employee_id) == "":
            raise ValueError("employee_id is required")
        return f"{self.base_url}/{quote(str(employee_id), safe='')}"

    @staticmethod
    def _payload(record: EmployeeInput) -> Dict[str, Any]:
        return normalize(record).to_payload()

    @staticmethod
    def _error_text(response: httpx.Response) -> str:
        """Body text of an error response, or the status's reason phrase."""
        try:
            text = response.text.strip()
        except (UnicodeDecodeError, LookupError):
            text = ""
        return text or httpx.codes.get_reason_phrase(response.status_code) or "Unknown error"

    @staticmethod
    def _decode_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(
                f"The employee directory returned invalid JSON: {exc}",
                context={"status": response.status_code, "url": str(response.request.url)},
            ) from exc

    def _decode_list(self, response: httpx.Response) -> List[RawEmployeeRecord]:
        data = self._decode_json(response)
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise DecodeError(
                "Expected a list of employee records",
                context={"url": str(response.request.url), "type": type(data).__name__},
            )
        return data

    def _decode_record(self, response: httpx.Response) -> RawEmployeeRecord:
        data = self._decode_json(response)
        if not isinstance(data, dict):
            raise DecodeError(
                "Expected an employee record",
                context={"url": str(response.request.url), "type": type(data).__name__},
            )
        return data
