"""
Router package for LiftLog.

This package contains all API routers organized by domain:
- health: Liveness and readiness checks
- workouts: Workout logging, history and deletion
- stats: Summary statistics
"""

from api.routers.health import router as health_router
from api.routers.stats import router as stats_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "health_router",
    "stats_router",
    "workouts_router",
]
