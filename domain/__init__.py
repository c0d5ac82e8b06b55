"""
Domain layer for LiftLog.

This package contains pure domain models and services that are independent
of infrastructure concerns (database, API, external services).
"""

from domain.models import (
    DayType,
    ExerciseEntry,
    ExerciseRecord,
    SetEntry,
    SetRecord,
    WorkoutDraft,
    WorkoutRecord,
)

__all__ = [
    "DayType",
    "ExerciseEntry",
    "ExerciseRecord",
    "SetEntry",
    "SetRecord",
    "WorkoutDraft",
    "WorkoutRecord",
]
