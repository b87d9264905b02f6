"""
Roster — Request ID Propagation
================================

What:  Correlates one logical operation across client logs, the wire and the
       local store's logs through an X-Request-ID header.
How:   A ContextVar holds the current ID. On the way out, an httpx request
       hook stamps it onto every request (generating one when unset). On the
       way in, the store's middleware adopts the caller's ID or makes one,
       and echoes it in the response.

Usage (caller side):
    request_id_var.set("checkout-42")
    await client.list_all()      # sent with X-Request-ID: checkout-42
"""

import uuid
from contextvars import ContextVar

import httpx
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent operations each keep their own ID.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return str(uuid.uuid4())[:8]


async def attach_request_id(request: httpx.Request) -> None:
    """
    httpx request hook: add X-Request-ID unless the caller already set one.

    The ID comes from request_id_var when set, otherwise a fresh short UUID.
    """
    if REQUEST_ID_HEADER not in request.headers:
        request.headers[REQUEST_ID_HEADER] = request_id_var.get() or new_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Local store middleware that assigns a request ID to each incoming request.

    Behavior:
        1. Use the client's X-Request-ID header when present
        2. Otherwise generate a short UUID
        3. Store it in request_id_var (restored once the request ends) and
           request.state for handlers and logs
        4. Echo it in the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()

        token = request_id_var.set(rid)
        request.state.request_id = rid

        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)
        response.headers[REQUEST_ID_HEADER] = rid

        return response
