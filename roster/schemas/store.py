"""
Roster — Local Store Response Schemas
======================================

What:  Pydantic models for the local store's non-record responses.
Who:   Returned by the store's exception handlers and health route.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standardized error body for every local store error.

    Example:
        {
            "error": "not_found",
            "message": "employee with ID '7' was not found",
            "details": {"resource": "employee", "resource_id": "7"},
            "request_id": "1f0c2a9b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    records: int = Field(description="Number of employee records currently stored")
    uptime_seconds: float = Field(description="Seconds since the store started")
