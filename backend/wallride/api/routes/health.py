"""Health Probes — liveness and readiness of the WallRide API.

Invariants:
    - GET /health/ is 200 whenever the process can serve requests
    - GET /health/ready is 200 only when the custom_fields table can be queried;
      an unreachable or unmigrated database is 503

Design Decisions:
    - Readiness counts custom field definitions instead of SELECT 1: the form
      endpoints are useless until the schema exists, so that is what "ready" means
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import func, select

import wallride.infrastructure.database as database
from wallride.core.errors import DatabaseError
from wallride.models.custom_field import CustomField

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    return {"status": "healthy", "service": "wallride-api"}


@router.get("/ready")
async def readiness():
    """Ready when the database answers and the custom field schema is in place."""
    manager = database.db_manager
    if manager is None:
        return _not_ready("database_unavailable")
    try:
        async with manager.session() as db:
            field_count = await db.scalar(
                select(func.count()).select_from(CustomField),
            )
    except DatabaseError as e:
        logger.warning(f"Readiness check failed: {e}", extra={"error_code": e.code})
        return _not_ready("database_unavailable")
    return {
        "status": "ready",
        "checks": {"database": "healthy", "custom_fields": field_count},
    }


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
