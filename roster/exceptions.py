"""
Roster — Custom Exception Hierarchy
====================================

What:  Application-specific exceptions for the client, the workflows and the
       local store.
How:   Each exception carries a human-readable message and an optional
       context dict. Callers display `str(error)` (the message) verbatim;
       the context is meant for logs.

Exception Hierarchy:
    RosterError (base)
    ├── RemoteError          → store answered with a non-2xx status
    ├── TransportError       → request could not be sent or completed
    │   └── DecodeError      → response body is not the JSON shape expected
    ├── ValidationError      → form input (client) or request body (store) invalid
    └── NotFoundError        → local store: record id does not exist (404)
"""

from typing import Any, Dict, Optional


class RosterError(Exception):
    """
    Base exception for all roster errors.

    Attributes:
        message:  User-facing error description
        context:  Additional debug info (method, url, field, ...)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = dict(context or {})
        super().__init__(self.message)


class RemoteError(RosterError):
    """
    Raised when the remote store responds with a non-success status.

    What:    Uniform error for every non-2xx response of every operation.
    Message: The response body text, or the standard reason phrase of the
             status when the body is empty.

    Attributes:
        status:  HTTP status code returned by the store
    """

    def __init__(
        self,
        status: int,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        ctx["status"] = status
        super().__init__(message=f"Error {status}: {message}", context=ctx)
        self.status = status
        self.detail = message

    @property
    def is_not_found(self) -> bool:
        return self.status == 404


class TransportError(RosterError):
    """
    Raised when a request could not be sent or its response not received.

    When:  Connection refused, DNS failure, dropped connection, protocol error.
    The original httpx exception is chained as __cause__.
    """

    def __init__(
        self,
        message: str = "Could not reach the employee directory",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DecodeError(TransportError):
    """
    Raised when a successful response cannot be decoded.

    When:  Body is not valid JSON, or it is JSON of the wrong shape
           (an object where a list is expected, a created record with no id).
    """

    def __init__(
        self,
        message: str = "The employee directory returned an unreadable response",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ValidationError(RosterError):
    """
    Raised when input fails validation.

    When:  A create/edit form has a blank field or a non-numeric age, or the
           local store receives a body that is not a JSON object.
    HTTP:  400 Bad Request (local store)
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(RosterError):
    """
    Raised by the local store when a requested record does not exist.

    HTTP:  404 Not Found. The client sees it as RemoteError(404, ...).
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = dict(context or {})
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
