# Middleware package init
"""
Roster — Cross-Cutting HTTP Concerns
=====================================

What:  Request correlation and exchange logging for both directions.

Outbound (EmployeeDirectoryClient):
    request hook attach_request_id → X-Request-ID header
    log_exchange                   → one line per response on roster.http

Inbound (local store), execution order:
    Request → [Request ID] → [Logging] → Route Handler
    Response ← [Request ID] ← [Logging] ← Route Handler
"""
