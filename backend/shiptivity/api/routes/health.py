"""Health & Readiness Probes: liveness and readiness endpoints.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if database is unreachable (readiness)
    - Readiness reports lanes whose priorities are not 1..N; it stays 200 for
      those since the service can still answer requests

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from rotation
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import shiptivity.infrastructure.database as database
from shiptivity.core.lane_view import inconsistent_lanes
from shiptivity.services.client_store import ClientStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "shiptivity-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe: database connectivity and lane consistency."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    async with manager.session() as db:
        clients = await ClientStore(db).list_clients()
    broken = [lane.value for lane in inconsistent_lanes(clients)]
    if broken:
        logger.warning(f"Lanes with non-dense priorities: {broken}")
    return {
        "status": "ready",
        "checks": {
            "database": "healthy",
            "lanes": "inconsistent" if broken else "consistent",
        },
        "inconsistent_lanes": broken,
    }
