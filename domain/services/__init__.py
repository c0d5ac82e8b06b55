"""
Domain services for LiftLog.

Pure functions over domain models; no I/O.
"""

from domain.services.workout_stats import (
    WorkoutStats,
    calculate_trend,
    compute_workout_stats,
    week_bounds,
)

__all__ = [
    "WorkoutStats",
    "calculate_trend",
    "compute_workout_stats",
    "week_bounds",
]
