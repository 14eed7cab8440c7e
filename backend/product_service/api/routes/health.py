"""Health & Readiness Probes: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the database is unreachable (readiness)
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from product_service.api.dependencies import get_db_manager
from product_service.config import get_settings
from product_service.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.version,
    }


@router.get("/ready")
async def readiness_check(
    manager: DatabaseSessionManager | None = Depends(get_db_manager),
):
    """Readiness probe, includes database connectivity."""
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
