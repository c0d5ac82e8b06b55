"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_settings
from backend.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint for liftlog.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}


@router.get("/health/ready")
def readiness(settings: Settings = Depends(get_settings)):
    """
    Readiness endpoint: reports whether the data store is configured.

    Does not call Supabase; a configured but unreachable store surfaces
    on the first workout request instead.
    """
    return {
        "status": "ok" if settings.has_database else "degraded",
        "database_configured": settings.has_database,
        "environment": settings.environment,
    }
