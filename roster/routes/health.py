"""
Roster — Health Check Route (Local Store)
==========================================

What:  Liveness probe reporting version, record count and uptime.
Who:   Scripts waiting for the local store to come up.
"""

import logging
import time

from fastapi import APIRouter, Depends

from roster import __version__
from roster.schemas.store import HealthResponse
from roster.store import EmployeeStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: EmployeeStore = Depends(get_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        records=len(store),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
