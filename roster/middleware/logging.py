"""
Roster — Exchange Logging
==========================

What:  One structured log line per HTTP exchange, on both sides of the wire.
How:   `log_exchange` is called by the directory client after each response;
       `RequestLoggingMiddleware` does the same for requests reaching the
       local store.

Log level by status:
    5xx → ERROR
    4xx → WARNING
    2xx/3xx → INFO

Request and response bodies are never logged (they carry personal data:
names and phone numbers).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from roster.middleware.request_id import request_id_var

http_logger = logging.getLogger("roster.http")
access_logger = logging.getLogger("roster.access")


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def log_exchange(
    method: str,
    url: str,
    status: int,
    duration_ms: float,
    request_id: str = "",
) -> None:
    """Log a completed outbound request made by the directory client."""
    http_logger.log(
        level_for_status(status),
        "%s %s %d %.1fms [%s]",
        method,
        url,
        status,
        duration_ms,
        request_id,
        extra={
            "request_id": request_id,
            "method": method,
            "url": url,
            "status": status,
            "duration_ms": round(duration_ms, 2),
        },
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Access log for the local store.

    Logged information:
        - Request: method, path, client IP
        - Response: status code, duration in milliseconds
        - Correlation: request ID from RequestIDMiddleware

    Health checks are skipped.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        path = request.url.path

        if path == "/health":
            return await call_next(request)

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        rid = request_id_var.get("")
        status = response.status_code

        access_logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
