"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- workouts: Workout history, draft preview and delete failure models
- stats: Summary statistics models
"""

from api.schemas.stats import StatsBody, StatsResponse
from api.schemas.workouts import (
    DeleteFailureDetail,
    DraftPreviewResponse,
    ExerciseResponse,
    SetResponse,
    WorkoutListResponse,
    WorkoutResponse,
)

__all__ = [
    "DeleteFailureDetail",
    "DraftPreviewResponse",
    "ExerciseResponse",
    "SetResponse",
    "StatsBody",
    "StatsResponse",
    "WorkoutListResponse",
    "WorkoutResponse",
]
