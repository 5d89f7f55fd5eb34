"""Health Routes — process liveness and database readiness for the User API.

Invariants:
    - GET /health answers 200 while the process serves requests, DB or not
    - GET /health/ready answers 503 until db_manager exists and SELECT 1 succeeds
    - Service name and version come from Settings, the same values the app reports

Design Decisions:
    - db_manager read through the module at call time: it is created in lifespan,
      after this router is imported
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from user_api.config import Settings, get_settings
from user_api.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])

NOT_READY = {"status": "not_ready", "reason": "database_unavailable"}


@router.get("", status_code=status.HTTP_200_OK)
async def liveness(settings: Settings = Depends(get_settings)):
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
    }


@router.get("/ready")
async def readiness():
    """Ready only when the session manager can reach the database."""
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        logger.warning("Not ready: database unavailable", extra={"path": "/health/ready"})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=NOT_READY,
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
